from .base import *  # noqa

DEBUG = True

VITE["mode"] = os.getenv("VITE_MODE", "development")
