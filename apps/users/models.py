# Models live in the infrastructure layer; re-exported here for Django's app registry.
from .infrastructure.models import *  # noqa: F401,F403
