"""Extension instances, bound to the app in create_app()."""
from flask_babel import Babel

from confmanager.backend import SupabaseBackend

babel = Babel()
backend = SupabaseBackend()
