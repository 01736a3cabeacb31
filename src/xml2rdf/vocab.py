"""
xml2rdf vocabulary

Fixed terms used to describe XML structure as RDF. Only ``rdf:type`` and
``rdfs:subClassOf`` are borrowed from the standard vocabularies.
"""

from rdflib import Namespace
from rdflib.namespace import RDF, RDFS

MODEL_NAMESPACE: str = "https://decisym.ai/xml2rdf/model#"
DEFAULT_NAMESPACE: str = "https://decisym.ai/xml2rdf/data"

X2R = Namespace(MODEL_NAMESPACE)

# classes
XML_NODE = X2R.XmlNode
XML_ATTRIBUTE = X2R.XmlAttribute

# relations
HAS_CHILD = X2R.hasChild
HAS_ATTRIBUTE = X2R.hasAttribute
HAS_NAME = X2R.hasName
HAS_VALUE = X2R.hasValue

TYPE = RDF.type
SUB_CLASS_OF = RDFS.subClassOf

__all__ = [
    "MODEL_NAMESPACE", "DEFAULT_NAMESPACE", "X2R",
    "XML_NODE", "XML_ATTRIBUTE",
    "HAS_CHILD", "HAS_ATTRIBUTE", "HAS_NAME", "HAS_VALUE",
    "TYPE", "SUB_CLASS_OF",
]
