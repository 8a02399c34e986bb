"""Infrastructure modules for the OttoHello integrations.

Centralized infrastructure components:
- configuration: Settings management (Settings, SlackSettings, BackendSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- operations: Uniform integration results (OperationResult, OperationStatus)
- notifications: Ordered-fallback notification dispatch
- services: Application-scoped providers (get_settings)
"""
