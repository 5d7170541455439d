class PrivatizeError(RuntimeError):
    pass


class UnterminatedBlock(PrivatizeError):
    def __init__(self, line_number: int):
        self.line_number = line_number
        super().__init__(
            f"<<PRIVATE block opened on line {line_number} but not closed."
        )


class MalformedBlock(PrivatizeError):
    pass


class AlreadyInitialized(PrivatizeError):
    def __init__(self):
        super().__init__("this repo has already initialized git-privatize")


class NotInitialized(PrivatizeError):
    def __init__(self):
        super().__init__("this repo has not initialized git-privatize, run init")


class MissingKeyFile(PrivatizeError):
    def __init__(self):
        super().__init__("provide the key to decrypt encrypted files")


class KeyFileNotFound(PrivatizeError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"key file not found: {path}")


class InvalidKey(PrivatizeError):
    pass


class MissingExportTarget(PrivatizeError):
    def __init__(self):
        super().__init__("export filename not provided")


class GitError(PrivatizeError):
    pass
