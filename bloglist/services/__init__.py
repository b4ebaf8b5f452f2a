from bloglist.services.auth import AuthService
from bloglist.services.blog import BlogService, ReconciliationReport
from bloglist.services.user import UserService

__all__ = ["AuthService", "BlogService", "ReconciliationReport", "UserService"]
