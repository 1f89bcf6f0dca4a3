from .directory_port import DirectoryPort
from .oracle_port import OraclePort
from .session_store_port import SessionStorePort
from .tabular_port import TabularPort

__all__ = ["DirectoryPort", "OraclePort", "SessionStorePort", "TabularPort"]
