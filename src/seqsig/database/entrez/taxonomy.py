# This source code is part of the Seqsig package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "seqsig.database.entrez"
__author__ = "The Seqsig contributors"
__all__ = ["fetch_taxon", "get_lineage", "xml_to_dict"]

import time
from numbers import Integral
from xml.etree import ElementTree
from seqsig.database.entrez.download import efetch
from seqsig.database.entrez.key import get_request_interval
from seqsig.database.error import RequestError


def fetch_taxon(taxon_ids):
    """
    Download the lineage of taxa from the NCBI Taxonomy database.

    This function requires an internet connection.

    Parameters
    ----------
    taxon_ids : str or int or iterable object of (str or int)
        A single taxonomy ID or a list of taxonomy IDs.

    Returns
    -------
    lineage : list of dict or list of (list of dict)
        The lineage of the taxon, starting with the root.
        Each ancestor is described by a dictionary, containing the keys
        ``'TaxId'``, ``'ScientificName'`` and ``'Rank'``.
        If a single ID was given, a single lineage is returned,
        otherwise a list of lineages.

    Raises
    ------
    RequestError
        If the database contains no taxon for a given ID.

    See Also
    --------
    get_lineage : Extract the lineage from the XML record.

    Examples
    --------

    >>> lineage = fetch_taxon(9606)
    >>> print([taxon["ScientificName"] for taxon in lineage][-2:])
    ['Homininae', 'Homo']
    """
    if isinstance(taxon_ids, (str, Integral)):
        taxon_ids = [taxon_ids]
        single_element = True
    else:
        single_element = False
    lineages = []
    for i, taxon_id in enumerate(taxon_ids):
        if i > 0:
            time.sleep(get_request_interval())
        content = efetch(taxon_id, "taxonomy", None, ret_mode="xml")
        lineages.append(get_lineage(content))
    if single_element:
        return lineages[0]
    else:
        return lineages


def get_lineage(xml_content):
    """
    Extract the lineage of a taxon from a NCBI Taxonomy record.

    Parameters
    ----------
    xml_content : str
        The record in XML format.

    Returns
    -------
    lineage : list of dict
        The lineage of the taxon, starting with the root.

    Raises
    ------
    RequestError
        If the record is malformed or contains no taxon.

    Examples
    --------

    >>> record = '''
    ... <TaxaSet><Taxon>
    ...   <TaxId>9606</TaxId>
    ...   <LineageEx>
    ...     <Taxon><TaxId>9605</TaxId><ScientificName>Homo</ScientificName>
    ...     <Rank>genus</Rank></Taxon>
    ...   </LineageEx>
    ... </Taxon></TaxaSet>
    ... '''
    >>> print(get_lineage(record))
    [{'TaxId': '9605', 'ScientificName': 'Homo', 'Rank': 'genus'}]
    """
    try:
        root = ElementTree.fromstring(xml_content)
    except ElementTree.ParseError as e:
        raise RequestError(f"The record is not valid XML: {e}")
    taxa_set = xml_to_dict(root).get("TaxaSet")
    if not isinstance(taxa_set, dict) or "Taxon" not in taxa_set:
        raise RequestError("The record does not contain any taxon")
    taxon = taxa_set["Taxon"]
    if isinstance(taxon, list):
        # Only a single taxon is requested at once
        taxon = taxon[0]
    lineage_ex = taxon.get("LineageEx")
    if not isinstance(lineage_ex, dict):
        # The root of the taxonomy has no ancestors
        return []
    lineage = lineage_ex["Taxon"]
    # A single ancestor is not merged into a list
    if not isinstance(lineage, list):
        lineage = [lineage]
    return lineage


def xml_to_dict(element):
    """
    Convert an XML element into nested dictionaries.

    An element without child elements is converted into
    ``{tag: text}``, an element with child elements into
    ``{tag: {child_tag: ...}}``.
    If multiple children have the same tag, their values are merged
    into a list.

    Parameters
    ----------
    element : xml.etree.ElementTree.Element
        The XML element.

    Returns
    -------
    dictionary : dict
        A dictionary with the tag of `element` as single key.

    Examples
    --------

    >>> from xml.etree import ElementTree
    >>> root = ElementTree.fromstring(
    ...     "<a><b>1</b><c><d>2</d></c><b>3</b></a>"
    ... )
    >>> print(xml_to_dict(root))
    {'a': {'b': ['1', '3'], 'c': {'d': '2'}}}
    """
    if len(element) == 0:
        return {element.tag: element.text}
    children = {}
    for child in element:
        value = xml_to_dict(child)[child.tag]
        if child.tag not in children:
            children[child.tag] = value
        elif isinstance(children[child.tag], list):
            children[child.tag].append(value)
        else:
            children[child.tag] = [children[child.tag], value]
    return {element.tag: children}
