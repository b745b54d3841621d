

class TableStudioError(Exception):
    """Base exception for all table_studio errors"""
    pass

class ConfigError(TableStudioError):
    """Invalid or inconsistent environment configuration"""
    pass

class RowLimitError(ConfigError, ValueError):
    """Row limit is not an integer within the accepted range"""
    pass

class UploadError(TableStudioError):
    """
    Upload service rejected the file or could not be reached.
    The message is shown to the user as-is.
    """
    pass

class QueryError(TableStudioError):
    """Query service returned a non-success response"""
    pass

class ListRefreshError(TableStudioError):
    """
    Listing datasets failed. Never shown to the user,
    only recorded on the view state.
    """
    pass
