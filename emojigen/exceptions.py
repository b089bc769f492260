from pathlib import Path


class Error(Exception):
    pass


class ExcludedEmojiFileError(Error):
    def __init__(self, path: Path, reason: str):
        super().__init__(f"Failed to read excluded emoji file {path}: {reason}")
        self.path = path
        self.reason = reason


class WriteAborted(Error):
    def __init__(self, file_name: str):
        super().__init__(f"Writing of {file_name} was aborted")
        self.file_name = file_name
