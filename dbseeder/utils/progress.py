from tqdm import tqdm


def progress_bar(total, desc):
    # disable=None turns the bar off when stderr is not a terminal
    return tqdm(total=total, desc=desc, unit="row", leave=False, disable=None)
