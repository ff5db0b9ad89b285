def percent_of(size, reference):
    """
    Expresses size as a percentage of reference.

    size: estimated or measured size in bytes
    reference: size to compare against, e.g. the uncompressed raster

    returns
        percent: float, or None when there is no reference to compare to
    """
    if not reference:
        return None
    return size / reference * 100

def format_percent(percent, label):
    if percent is None:
        return f"no {label} size"
    return f"{percent:.3f}% of {label}"
