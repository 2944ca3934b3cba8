from .api import Api as Api
from .database import Database as Database
from .functions import Functions as Functions
