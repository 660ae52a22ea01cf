# Database models
from .internship_application import InternshipApplication
