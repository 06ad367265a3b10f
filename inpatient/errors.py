# error taxonomy; each error is local to one pipeline stage


class InpatientError(Exception):
    pass


# input file missing, unreadable or with the wrong columns
class LoadError(InpatientError):
    pass


# length-of-stay code outside the expected domain
class LabelDerivationError(InpatientError):

    def __init__(self, message, rows=()):
        super().__init__(message)
        self.rows = list(rows)

    def __reduce__(self):
        return self.__class__, (self.args[0], self.rows)


# stratum too sparse to appear on both sides of a split
class PartitionError(InpatientError):
    pass


# category value outside the domain fixed at encoding time
class EncodingError(InpatientError):

    def __init__(self, column, values, rows=()):
        self.column = column
        self.values = list(values)
        self.rows = list(rows)
        super().__init__('Column %s has %d record(s) with unknown categories: %s'
                         % (column, len(self.rows), ', '.join(str(v) for v in self.values[:10])))

    def __reduce__(self):
        return self.__class__, (self.column, self.values, self.rows)


# training data violates a variant's precondition
class FitError(InpatientError):
    pass


class ScoringError(InpatientError):
    pass


class SelectionError(InpatientError):
    pass


class ConfigError(InpatientError):
    pass
