from snapname.naming.deriver import FilenameDeriver
from snapname.naming.factory import FilenameDeriverFactory

__all__ = ["FilenameDeriver", "FilenameDeriverFactory"]
