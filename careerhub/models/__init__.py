# __init__.py
from careerhub.models.career_paths import CareerPath, CareerPathSkill, UserCareerGoal
from careerhub.models.courses import Course, UserCourse
from careerhub.models.jobs import JobApplication, JobPosting, RecruiterProfile
from careerhub.models.live_sessions import LiveSession
from careerhub.models.mentorship import EducatorProfile, Mentorship
from careerhub.models.profile import Profile
from careerhub.models.recommendation import Recommendation
from careerhub.models.skills import Skill, UserSkill

__all__ = [
	"CareerPath",
	"CareerPathSkill",
	"UserCareerGoal",
	"Course",
	"UserCourse",
	"JobApplication",
	"JobPosting",
	"RecruiterProfile",
	"LiveSession",
	"EducatorProfile",
	"Mentorship",
	"Profile",
	"Recommendation",
	"Skill",
	"UserSkill",
]
