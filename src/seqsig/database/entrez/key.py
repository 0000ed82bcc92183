# This source code is part of the Seqsig package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "seqsig.database.entrez"
__author__ = "The Seqsig contributors"
__all__ = ["set_api_key", "get_api_key", "get_request_interval"]


_API_KEY = None

# Waiting times in seconds between two requests,
# slightly above the limits of 3 and 10 requests per second
_INTERVAL_WITHOUT_KEY = 0.37
_INTERVAL_WITH_KEY = 0.11


def get_api_key():
    """
    Get the
    `NCBI API key <https://ncbiinsights.ncbi.nlm.nih.gov/2017/11/02/new-api-keys-for-the-e-utilities/>`_.

    Returns
    -------
    api_key : str or None
        The API key, if it was already set before, ``None`` otherwise.
    """
    global _API_KEY
    return _API_KEY


def set_api_key(key):
    """
    Set the
    `NCBI API key <https://ncbiinsights.ncbi.nlm.nih.gov/2017/11/02/new-api-keys-for-the-e-utilities/>`_.

    Using an API key increases the request limit on the NCBI servers
    and is automatically used by functions in
    :mod:`seqsig.database.entrez`.
    This key is kept only in memory and hence removed in the end of the
    Python session.

    Parameters
    ----------
    key : str or None
        The API key.
        ``None`` removes a previously set key.
    """
    global _API_KEY
    _API_KEY = key


def get_request_interval():
    """
    Get the time to wait between two consecutive requests.

    Returns
    -------
    interval : float
        The waiting time in seconds.
        The time is shorter, if an API key is set.

    Examples
    --------

    >>> set_api_key(None)
    >>> print(get_request_interval())
    0.37
    """
    if get_api_key() is None:
        return _INTERVAL_WITHOUT_KEY
    else:
        return _INTERVAL_WITH_KEY
