from .data.models import Card, Folder, ReviewLog  # noqa: F401
