

class ProcMapsException(Exception):
    pass


class DeadProcess(ProcMapsException):
    pass


class ParserStateError(ProcMapsException):
    pass


class MalformedHeader(ProcMapsException):
    def __init__(self, line, state=None):
        super().__init__('Malformed mapping header {!r}'.format(line))
        self.line = line
        # ExpectUsage positioned after the bad line, for callers that resume
        self.state = state


class MalformedUsage(ProcMapsException):
    state = None

    def __init__(self, line):
        super().__init__('Malformed usage line {!r}'.format(line))
        self.line = line


class FormatDrift(ProcMapsException):
    state = None


class UnrecognizedKey(FormatDrift):
    def __init__(self, key):
        super().__init__('Unrecognized key: {}'.format(key))
        self.key = key


class UnrecognizedUnit(FormatDrift):
    def __init__(self, unit):
        super().__init__('Unrecognized unit: {}'.format(unit))
        self.unit = unit


class UnrecognizedVmFlag(FormatDrift):
    def __init__(self, flag):
        super().__init__('Unrecognized VM flag: {}'.format(flag))
        self.flag = flag
