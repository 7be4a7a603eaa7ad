"""Domain layer for invoicedash application."""


# Import services lazily to avoid circular imports with the database layer
def __getattr__(name):
    if name == "ReportingService":
        from invoicedash.domain.reporting import ReportingService
        return ReportingService
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
