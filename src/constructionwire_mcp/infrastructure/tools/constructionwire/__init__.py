from .catalog import build_constructionwire_catalog
from .constructionwire_http_client import ConstructionwireHttpClient

__all__ = ["ConstructionwireHttpClient", "build_constructionwire_catalog"]
