from . import quilt
