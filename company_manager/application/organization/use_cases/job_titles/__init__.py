from .create_job_title_use_case import CreateJobTitleUseCase
from .delete_job_title_use_case import DeleteJobTitleUseCase
from .get_job_title_use_case import GetJobTitleByIdUseCase
from .list_job_titles_use_case import ListJobTitlesUseCase
from .update_job_title_use_case import UpdateJobTitleUseCase

__all__ = [
    "CreateJobTitleUseCase",
    "DeleteJobTitleUseCase",
    "GetJobTitleByIdUseCase",
    "ListJobTitlesUseCase",
    "UpdateJobTitleUseCase",
]
