# HR portal: persisted entity stores, session and role authorization

__version__ = "0.1.0"
