from rest_framework.routers import SimpleRouter


class OptionalSlashRouter(SimpleRouter):
    """Router matching ``/api/medicines`` as well as ``/api/medicines/``."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.trailing_slash = "/?"
