
class SurveyDashboardError(Exception):
    """Base exception for all survey_dashboard errors"""
    pass

class ConfigError(SurveyDashboardError):
    """Invalid or missing global.json"""
    pass

class DatasetLoadError(SurveyDashboardError):
    """
    Survey file could not be loaded: missing, unreadable or unparseable
    """
    pass

class DatasetSchemaError(DatasetLoadError):
    """
    CSV parsed but doesn't match what Dataset expects
    missing required columns, etc
    """
    pass
