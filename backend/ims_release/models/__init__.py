"""Database Models Package"""

from ims_release.models.project import Project, ProjectStatus
from ims_release.models.release import Release, ReleaseStatus
from ims_release.models.page import Page
from ims_release.models.member import Member

__all__ = ["Project", "ProjectStatus", "Release", "ReleaseStatus", "Page", "Member"]
