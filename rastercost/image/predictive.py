def average_predictor(previous, above=None):
    """
    Predicts the current sample from the previous one in the stream and,
    when there is a scanline above, the sample directly above it.

    previous: int, previous byte of the channel
    above: int or None, same-channel byte one scanline up

    returns
        prediction: floor((previous + above) / 2), or previous without above
    """
    if above is None:
        return previous
    return (previous + above) // 2
