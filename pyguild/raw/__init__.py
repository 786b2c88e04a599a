from .audit_logs import *
from .channels import *
from .gateway import *
from .guilds import *
from .interactions import *
from .messages import *
from .users import *
