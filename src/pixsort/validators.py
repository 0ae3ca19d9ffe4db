from os import path

from pathvalidate import sanitize_filepath
from textual.validation import ValidationResult, Validator

from pixsort.functions.path import normalise


class IsValidFilePath(Validator):
    def __init__(self, strict: bool = False) -> None:
        super().__init__(failure_description="Path contains illegal characters.")
        self.strict = strict

    def validate(self, value: str) -> ValidationResult:
        if value == "":
            return self.success()
        value = normalise(path.abspath(path.expanduser(value)))
        if value == normalise(sanitize_filepath(value, platform="auto")):
            return self.success()
        else:
            return self.failure()


class IsExistingFolder(Validator):
    def __init__(self, strict: bool = True) -> None:
        super().__init__(failure_description="Folder does not exist.")
        self.strict = strict

    def validate(self, value: str) -> ValidationResult:
        if path.isdir(path.expanduser(value)):
            return self.success()
        else:
            return self.failure()


class IsShortcutKey(Validator):
    def __init__(self, reserved: tuple[str, ...] = (), strict: bool = True) -> None:
        super().__init__(failure_description="Use a single, unreserved character.")
        self.reserved = reserved
        self.strict = strict

    def validate(self, value: str) -> ValidationResult:
        if value == "" or (len(value) == 1 and value not in self.reserved):
            return self.success()
        else:
            return self.failure()
