# file: src/module1_codeword_table/errors.py

"""
Codeword table exception hierarchy.
"""


class CodewordTableError(Exception):
    """Base exception for codeword table lookups."""
    pass


class DomainError(CodewordTableError):
    """
    Raised when a cluster id or abstract codeword is outside the table domain.

    Indicates a programming error in the caller: the symbol builder only
    produces clusters 0..2 and values 0..928.
    """

    def __init__(self, message: str, cluster=None, value=None):
        super().__init__(message)
        self.cluster = cluster
        self.value = value
