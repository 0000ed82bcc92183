# This source code is part of the Seqsig package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "seqsig.database.entrez"
__author__ = "The Seqsig contributors"
__all__ = ["fetch_entry", "iter_entries", "efetch"]

import time
import requests
from seqsig.database.entrez.check import check_response
from seqsig.database.entrez.key import get_api_key, get_request_interval

_fetch_url = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils/efetch.fcgi"
_tool_name = "Seqsig"


def fetch_entry(accessions, protein=False, ret_type=None, verbose=False):
    """
    Download sequence records from the NCBI Entrez database as text.

    This function requires an internet connection.

    Parameters
    ----------
    accessions : str or iterable object of str
        A single accession number (e.g. ``'NC_012920'``) or a list of
        accession numbers.
    protein : bool, optional
        If true, the records are fetched from the *protein* database,
        otherwise from the *nucleotide* database.
    ret_type : str, optional
        The retrieval type.
        By default, the records are fetched in GenBank (``'gb'``) or
        GenPept (``'gp'``) format, respectively.
    verbose : bool, optional
        If true, the function will output the download progress.

    Returns
    -------
    entries : str or list of str
        The record(s) as text.
        If a single string (a single accession) was given in
        `accessions`, a single string is returned.
        If a list (or other iterable object) was given, a list of
        strings is returned.

    Warnings
    --------
    Even if you give valid input to this function, in rare cases the
    database might return no or malformed data to you.
    In these cases the request should be retried.
    When the issue occurs repeatedly, the error is probably in your
    input.

    See Also
    --------
    iter_entries : Lazily fetch one record after another.

    Examples
    --------

    >>> entry = fetch_entry("NC_012920")
    >>> print(entry.split()[:2])
    ['LOCUS', 'NC_012920']
    """
    if isinstance(accessions, str):
        return next(iter_entries([accessions], protein, ret_type))
    entries = []
    accessions = list(accessions)
    for i, entry in enumerate(iter_entries(accessions, protein, ret_type)):
        # Verbose output
        if verbose:
            print(
                f"Fetched entry {i + 1:d} / {len(accessions):d} "
                f"({accessions[i]})",
                end="\r",
            )
        entries.append(entry)
    if verbose:
        print("\nDone")
    return entries


def iter_entries(accessions, protein=False, ret_type=None):
    """
    Iterate over sequence records downloaded from the NCBI Entrez
    database.

    Each record is requested only when the iteration reaches it.
    Between two requests this function waits, to stay within the
    request limit of NCBI.

    This function requires an internet connection.

    Parameters
    ----------
    accessions : str or iterable object of str
        A single accession number or a list of accession numbers.
    protein : bool, optional
        If true, the records are fetched from the *protein* database,
        otherwise from the *nucleotide* database.
    ret_type : str, optional
        The retrieval type.
        By default, the records are fetched in GenBank (``'gb'``) or
        GenPept (``'gp'``) format, respectively.

    Yields
    ------
    entry : str
        A record as text.
    """
    if isinstance(accessions, str):
        accessions = [accessions]
    if protein:
        db_name = "protein"
        default_ret_type = "gp"
    else:
        db_name = "nuccore"
        default_ret_type = "gb"
    if ret_type is None:
        ret_type = default_ret_type
    for i, accession in enumerate(accessions):
        if i > 0:
            time.sleep(get_request_interval())
        yield efetch(accession, db_name, ret_type)


def efetch(uid, db_name, ret_type, ret_mode="text"):
    """
    Send a single request to the *EFetch* E-utility.

    Parameters
    ----------
    uid : str or int
        The *unique identifier* (UID) or accession of the record.
    db_name : str
        E-utility database name, e.g. ``'nuccore'`` or ``'taxonomy'``.
    ret_type : str or None
        Retrieval type.
    ret_mode : str, optional
        Retrieval mode.

    Returns
    -------
    content : str
        The content of the response.

    Raises
    ------
    RequestError
        If NCBI Entrez responded with an error.
    """
    param_dict = {
        "db": db_name,
        "id": str(uid),
        "retmode": ret_mode,
        "tool": _tool_name,
    }
    if ret_type is not None:
        param_dict["rettype"] = ret_type
    api_key = get_api_key()
    if api_key is not None:
        param_dict["api_key"] = api_key
    r = requests.get(_fetch_url, params=param_dict)
    return check_response(r)
