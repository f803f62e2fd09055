from cas.host.base import DEFAULT_DOCTYPE, HtmlHost, extract_doctype
from cas.host.lxml_host import LxmlDocument, LxmlHost

__all__ = ["DEFAULT_DOCTYPE", "HtmlHost", "LxmlDocument", "LxmlHost", "extract_doctype"]
