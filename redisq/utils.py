def listify(x):
    if x is None:
        return []
    elif isinstance(x, list):
        return x
    elif isinstance(x, (tuple, set, frozenset)):
        return sorted(x)
    else:
        return [x]
