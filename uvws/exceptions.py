class UvwsError(Exception):
    # base exception for all application-specific errors.
    pass

class ConfigError(UvwsError):
    # errors related to uvws settings files and profiles.
    pass

class OutputError(UvwsError):
    # errors during output operations.
    pass
