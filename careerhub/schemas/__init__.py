# __init__.py
from careerhub.schemas.career_paths import CareerPathRead, CareerPathsResponse, CareerPathWithSkills, RequiredSkill, UserCareerGoalRead
from careerhub.schemas.courses import CourseRead, CourseWithEnrollment, ProgressUpdate, UserCourseRead
from careerhub.schemas.dashboard import DashboardResponse, DashboardStats
from careerhub.schemas.educator import EducatorAnalytics, EducatorDashboardResponse, LiveSessionRead
from careerhub.schemas.jobs import JobApplicationCreate, JobApplicationRead, JobListResponse, JobPostingRead
from careerhub.schemas.mentorship import MentorRead, MentorshipCreate, MentorshipRead
from careerhub.schemas.profile import ProfileRead, ProfileResponse, ProfileStats, ProfileSummary, ProfileUpdate
from careerhub.schemas.recommendation import (
	CareerPathTarget,
	CourseTarget,
	EnrichedRecommendation,
	GenerateRecommendationsResponse,
	JobTarget,
	MentorTarget,
	Recommendation,
	RecommendationBoardResponse,
)
from careerhub.schemas.recruiter import (
	ApplicantRead,
	ApplicationStatusUpdate,
	RecruiterDashboardResponse,
	RecruiterStats,
)
from careerhub.schemas.skills import SkillRead, UserSkillCreate, UserSkillRead, UserSkillsResponse, UserSkillUpdate
from careerhub.schemas.user import CurrentUser, TokenData

__all__ = [
	"CareerPathRead",
	"CareerPathsResponse",
	"CareerPathWithSkills",
	"RequiredSkill",
	"UserCareerGoalRead",
	"CourseRead",
	"CourseWithEnrollment",
	"ProgressUpdate",
	"UserCourseRead",
	"DashboardResponse",
	"DashboardStats",
	"EducatorAnalytics",
	"EducatorDashboardResponse",
	"LiveSessionRead",
	"JobApplicationCreate",
	"JobApplicationRead",
	"JobListResponse",
	"JobPostingRead",
	"MentorRead",
	"MentorshipCreate",
	"MentorshipRead",
	"ProfileRead",
	"ProfileResponse",
	"ProfileStats",
	"ProfileSummary",
	"ProfileUpdate",
	"CareerPathTarget",
	"CourseTarget",
	"EnrichedRecommendation",
	"GenerateRecommendationsResponse",
	"JobTarget",
	"MentorTarget",
	"Recommendation",
	"RecommendationBoardResponse",
	"ApplicantRead",
	"ApplicationStatusUpdate",
	"RecruiterDashboardResponse",
	"RecruiterStats",
	"SkillRead",
	"UserSkillCreate",
	"UserSkillRead",
	"UserSkillsResponse",
	"UserSkillUpdate",
	"CurrentUser",
	"TokenData",
]
