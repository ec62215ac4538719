"""
Conversion of BES API element trees into plain Python containers.

A converted value is one of:

* ``str``  – text of a leaf element
* ``list`` – values of two or more same-named siblings, in document order
* ``dict`` – local element name → converted value
"""

from typing import Union

from lxml import etree

ConvertedValue = Union[str, list["ConvertedValue"], dict[str, "ConvertedValue"]]


def elem_to_dict(node: etree._Element) -> dict[str, ConvertedValue]:
    """
    Convert the element children of *node* into a dict.

    Namespace prefixes are dropped from keys.  A child with text and no
    children of its own becomes a string; any other child is converted
    recursively (an empty element becomes ``{}``).  The first child
    under a name is stored as-is, the second turns the entry into a
    two-item list and later ones are appended.
    """
    result: dict[str, ConvertedValue] = {}
    for child in node.iterchildren(tag=etree.Element):
        key = etree.QName(child).localname

        if len(child) == 0 and child.text is not None:
            value: ConvertedValue = child.text
        else:
            value = elem_to_dict(child)

        if key not in result:
            result[key] = value
        elif isinstance(result[key], list):
            result[key].append(value)
        else:
            result[key] = [result[key], value]
    return result
