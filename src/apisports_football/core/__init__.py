"""Request pipeline core: configuration, domain models, services, errors."""
