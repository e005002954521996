class CsStatsError(Exception):
    pass


class SettingsError(CsStatsError):
    pass
