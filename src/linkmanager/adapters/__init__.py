from .json_session_store import JsonSessionStore
from .local_directory import LocalDirectoryAdapter
from .openpyxl_tabular import OpenpyxlTabularAdapter
from .oracle_mock import MockOracleAdapter
from .oracle_openai import OpenAIOracleAdapter

__all__ = [
    "JsonSessionStore",
    "LocalDirectoryAdapter",
    "MockOracleAdapter",
    "OpenAIOracleAdapter",
    "OpenpyxlTabularAdapter",
]
