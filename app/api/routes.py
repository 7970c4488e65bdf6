from fastapi import APIRouter
from app.controllers import auth_controller
from app.controllers import job_controller
from app.controllers import applicant_controller
from app.controllers import interview_controller
from app.controllers import application_controller
from app.controllers import user_controller
from app.controllers import resume_controller
from app.controllers import dashboard_controller
from app.controllers import log_controller


router = APIRouter()


router.include_router(auth_controller.router, prefix="/auth", tags=["Auth"])
router.include_router(job_controller.router, prefix="/hr/jobs", tags=["Jobs"])
router.include_router(applicant_controller.router, prefix="/hr/applicants", tags=["Applicants"])
router.include_router(interview_controller.router, prefix="/hr/interviews", tags=["Interviews"])
router.include_router(dashboard_controller.router, prefix="/hr", tags=["Dashboard"])
router.include_router(application_controller.router, prefix="/applications", tags=["Applications"])
router.include_router(user_controller.router, prefix="/user", tags=["Candidate"])
router.include_router(resume_controller.router, tags=["Resume"])
router.include_router(log_controller.router, prefix="/logs", tags=["Logs"])
