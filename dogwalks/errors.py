#
# error taxonomy.
#
# ConfigurationError is fatal for the whole run (bad CRS, missing columns, bad parameters).
# DataIntegrityError is scoped to a single walk, and batch processing may skip it with a warning.
#


class ConfigurationError(Exception):
    pass


class DataIntegrityError(Exception):
    def __init__(self, message:str, walk=None):
        super().__init__(message if walk is None else f"walk {walk}: {message}")
        self.walk = walk


# raised when two paired tracks share no aligned timepoint - distinct from a computed but degenerate separation.
class NoAlignedTimepointsError(DataIntegrityError):
    pass
