"""Custom exception classes for the file server."""


class FileServerException(Exception):
    """
    Base exception class for all file server errors.
    """
    pass


class DuplicateNameError(FileServerException):
    """
    Raised when a file record with the same name already exists.
    """
    pass


class RecordNotFoundError(FileServerException):
    """
    Raised when a store operation targets a file name that does not exist.
    """
    pass


class CredentialExistsError(FileServerException):
    """
    Raised when provisioning an identity that is already registered.
    """
    pass


class StorageError(FileServerException):
    """
    Raised when the underlying database fails unexpectedly.
    """
    pass
