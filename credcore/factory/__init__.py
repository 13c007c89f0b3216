from credcore.factory.app import configure_app, create_app

__all__ = ["configure_app", "create_app"]
