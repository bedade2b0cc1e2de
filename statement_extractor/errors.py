# statement_extractor/errors.py


class StatementError(Exception):
    """Base class for everything that can go wrong with one statement."""


class StatementParseError(StatementError):
    pass


class UnrecognizedStatementFormat(StatementParseError):
    pass


class MissingRequiredAnchor(StatementParseError):
    """A statement period or summary figure the extractor needs is absent."""

    def __init__(self, issuer, anchor):
        self.issuer = issuer
        self.anchor = anchor
        super().__init__(f"{issuer} statement is missing '{anchor}'")


class InvalidStatementDate(StatementParseError):
    def __init__(self, token, reason):
        self.token = token
        super().__init__(f"Invalid transaction date '{token}': {reason}")


class UnknownFileType(StatementError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Unsupported statement file type: {path}")


class StatementValidationError(StatementError):
    def __init__(self, failures):
        self.failures = list(failures)
        super().__init__("\n".join(f.message for f in self.failures))


class StatementFileError(StatementError):
    def __init__(self, path, error):
        self.path = path
        self.error = error
        super().__init__(f"Error reading file {path}:  {error}")


class BatchError(StatementError):
    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("\n".join(str(e) for e in self.errors))
