"""
Tests for column classification and financial role discovery.
"""
from csv_insights.schema import classify_columns, infer_column_roles


class TestClassifyColumns:

    def test_basic_partition(self, make_dataset):
        ds = make_dataset("date,amount,category\n2024-01-01,10.5,food\n2024-01-02,3,travel")
        cls = classify_columns(ds)

        assert cls.date == ["date"]
        assert cls.numeric == ["amount"]
        assert cls.categorical == ["category"]

    def test_every_header_in_exactly_one_set(self, make_dataset):
        ds = make_dataset("id,Timestamp,price,notes,flag\n1,5,2.5,x,true\n2,6,3,y,false")
        cls = classify_columns(ds)

        together = cls.numeric + cls.categorical + cls.date
        assert sorted(together) == sorted(ds.headers)
        assert len(together) == len(set(together))

    def test_date_name_shadows_numeric_values(self, make_dataset):
        ds = make_dataset("response_time,Update_Date\n12,3\n15,4")
        cls = classify_columns(ds)

        assert cls.date == ["response_time", "Update_Date"]
        assert cls.numeric == []

    def test_boolean_literals_are_categorical(self, make_dataset):
        ds = make_dataset("approved\ntrue\nfalse")

        assert classify_columns(ds).categorical == ["approved"]

    def test_empty_value_in_sample_makes_categorical(self, make_dataset):
        ds = make_dataset("a,b\n1,x\n,y")

        assert classify_columns(ds).categorical == ["a", "b"]

    def test_values_with_units_are_numeric(self, make_dataset):
        cls = classify_columns(make_dataset("discount,weight\n10%,5kg\n20%,7kg"))

        assert cls.numeric == ["discount", "weight"]
        assert cls.categorical == []

    def test_only_first_ten_rows_sampled(self, make_dataset):
        lines = ["qty"] + [str(i) for i in range(10)] + ["n/a"]
        cls = classify_columns(make_dataset("\n".join(lines)))

        assert cls.numeric == ["qty"]

    def test_no_rows_defaults_to_numeric(self, make_dataset):
        ds = make_dataset("a,b\n,")
        cls = classify_columns(ds)

        assert len(ds.rows) == 0
        assert cls.numeric == ["a", "b"]


class TestInferColumnRoles:

    def test_first_matching_header_wins(self, make_dataset):
        ds = make_dataset("unit_price,total_amount,expense_type,receipt_attached\n1,2,x,true")
        roles = infer_column_roles(ds, classify_columns(ds))

        assert roles == {"amount": "unit_price", "category": "expense_type", "receipt": "receipt_attached"}

    def test_category_must_be_categorical(self, make_dataset):
        ds = make_dataset("amount,type\n10,1\n20,2")
        roles = infer_column_roles(ds, classify_columns(ds))

        assert roles == {"amount": "amount"}
