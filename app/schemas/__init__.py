from .user import UserCreate, UserLogin, UserOut
from .tokens import Token, TokenPayload
from .task import TaskCreate, TaskUpdate, TaskStatusUpdate, TaskFilter, TaskOut, TaskBase
