from model.base import Base
from model.school import School
from model.teacher import Teacher
from model.training import Training
from model.review import Review
from model.user import UserProfile, UserRole

__all__ = ["Base", "School", "Teacher", "Training", "Review", "UserProfile", "UserRole"]
