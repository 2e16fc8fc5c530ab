from enum import Enum


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    HOD = "HOD"
    FACULTY = "FACULTY"
    STUDENT = "STUDENT"


class Department(str, Enum):
    CSE = "CSE"
    ECE = "ECE"
    ME = "ME"
    EEE = "EEE"
    ISE = "ISE"
    CIVIL = "CIVIL"
    AIML = "AIML"
    AIDS = "AIDS"
    CSBS = "CSBS"


class EventStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
