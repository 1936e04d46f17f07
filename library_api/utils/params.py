import math


def _to_number(value: str):
    text = value.strip()
    # float() also accepts "1_000"; query strings should not
    if not text or "_" in text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number


def coerce_params(params) -> dict:
    """
    Path/query values always arrive as strings.
    "true"/"false" -> bool, finite numeric strings -> int/float, the rest untouched.
    Returns a new dict.
    """
    converted = {}
    for key, value in dict(params).items():
        if not isinstance(value, str):
            converted[key] = value
        elif value == "true":
            converted[key] = True
        elif value == "false":
            converted[key] = False
        else:
            number = _to_number(value)
            converted[key] = value if number is None else number
    return converted
