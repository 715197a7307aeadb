from __future__ import annotations


class RecipetypeError(Exception):
    pass


class ConfigError(RecipetypeError):
    pass


class MissingFileError(RecipetypeError):
    pass


class ValidationError(RecipetypeError):
    def __init__(self, message: str, diagnostics: list[str] | None = None, source_path: str | None = None) -> None:
        super().__init__(message)
        self.diagnostics = list(diagnostics or [])
        self.source_path = source_path


class TypstError(RecipetypeError):
    pass
