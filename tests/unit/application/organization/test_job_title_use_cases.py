"""Tests for job title use cases."""

import pytest

from company_manager.application.organization.use_cases.job_titles import (
    CreateJobTitleUseCase,
    DeleteJobTitleUseCase,
    GetJobTitleByIdUseCase,
    ListJobTitlesUseCase,
    UpdateJobTitleUseCase,
)
from company_manager.domain.common.value_objects.ids import JobTitleId
from company_manager.domain.organization.exceptions import (
    JobTitleNameAlreadyInUseError,
    JobTitleNotFoundError,
)
from company_manager.infrastructure.organization.schemas import JobTitleRequest


@pytest.fixture
def seeded(job_title_repository):
    create = CreateJobTitleUseCase(job_title_repository)
    return [
        create.create_job_title(JobTitleRequest(name="Analyst", hierarchy_level=4)),
        create.create_job_title(JobTitleRequest(name="Senior Analyst", hierarchy_level=3)),
        create.create_job_title(JobTitleRequest(name="Director", hierarchy_level=1)),
    ]


def test_create(job_title_repository) -> None:
    dto = CreateJobTitleUseCase(job_title_repository).create_job_title(
        JobTitleRequest(name="Intern", hierarchy_level=5, description=" Learning ")
    )

    assert dto.name == "Intern"
    assert dto.description == "Learning"
    assert dto.is_active


def test_create_duplicate(job_title_repository, seeded) -> None:
    with pytest.raises(
        JobTitleNameAlreadyInUseError, match="Job title name 'Analyst' is already in use."
    ):
        CreateJobTitleUseCase(job_title_repository).create_job_title(
            JobTitleRequest(name="Analyst", hierarchy_level=4)
        )


def test_update(job_title_repository, seeded) -> None:
    analyst = seeded[0]

    dto = UpdateJobTitleUseCase(job_title_repository).update_job_title(
        JobTitleId(analyst.id), JobTitleRequest(name="Junior Analyst", hierarchy_level=5)
    )

    assert dto.name == "Junior Analyst"
    assert dto.hierarchy_level == 5


def test_update_to_taken_name(job_title_repository, seeded) -> None:
    with pytest.raises(JobTitleNameAlreadyInUseError):
        UpdateJobTitleUseCase(job_title_repository).update_job_title(
            JobTitleId(seeded[0].id), JobTitleRequest(name="Director", hierarchy_level=4)
        )


def test_update_missing(job_title_repository) -> None:
    with pytest.raises(JobTitleNotFoundError, match="Job title not found."):
        UpdateJobTitleUseCase(job_title_repository).update_job_title(
            JobTitleId.generate(), JobTitleRequest(name="Ghost", hierarchy_level=4)
        )


def test_delete_and_get(job_title_repository, seeded) -> None:
    target = JobTitleId(seeded[2].id)
    get = GetJobTitleByIdUseCase(job_title_repository)
    assert get.get_job_title(target) is not None

    DeleteJobTitleUseCase(job_title_repository).delete_job_title(target)
    DeleteJobTitleUseCase(job_title_repository).delete_job_title(target)

    assert get.get_job_title(target) is None


def test_list_ordered_by_level(job_title_repository, seeded) -> None:
    result = ListJobTitlesUseCase(job_title_repository).list_job_titles()

    assert [j.name for j in result.items] == ["Director", "Senior Analyst", "Analyst"]


def test_list_filters(job_title_repository, seeded) -> None:
    list_job_titles = ListJobTitlesUseCase(job_title_repository)

    assert list_job_titles.list_job_titles(name_contains="ANALYST").total == 2
    assert [j.name for j in list_job_titles.list_job_titles(hierarchy_level=1).items] == [
        "Director"
    ]
    assert list_job_titles.list_job_titles(is_active=False).total == 0
