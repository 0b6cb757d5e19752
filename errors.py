"""
Fatal errors raised before a simulation starts.

Every error aborts the run with exit status 1; there is no recoverable case.
"""

USAGE = "Usage: ./iosched [-v] [-q] [-f] [-s<schedalgo>] inputfile"


class IOSchedError(Exception):
    exit_code = 1


class UsageError(IOSchedError):
    def __init__(self, message=USAGE):
        super().__init__(message)


class UnknownPolicyError(IOSchedError):
    def __init__(self, letter):
        super().__init__(f"Unknown Scheduler spec: -s {letter}")
        self.letter = letter


class InputUnavailableError(IOSchedError):
    def __init__(self, path):
        super().__init__(f"Not a valid inputfile <{path}>")
        self.path = path


class MalformedInputError(IOSchedError):
    def __init__(self, path, line_number, line):
        super().__init__(f"Malformed request in <{path}> line {line_number}: {line.rstrip()!r}")
        self.path = path
        self.line_number = line_number
