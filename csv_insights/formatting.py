def fmt_number(v):
    """Render a number the way it reads in JSON: 5000, 12.5, -0.25."""
    try:
        if v is None:
            return 'N/A'
        f = float(v)
        if f.is_integer():
            return str(int(f))
        return repr(f)
    except Exception:
        return str(v)


def currency_fmt(v, symbol=''):
    try:
        if v is None:
            return 'N/A'
        return f"{symbol}{v:,.2f}"
    except Exception:
        return str(v)
