# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

from typing import Any, Dict, Iterator, List, Tuple

import yaml

from ..errors import DataParseError

def _shape_error(key: str, expected: str, value: Any) -> DataParseError:
    return DataParseError(f"failed to parse data.yaml: \"{key}\" must be {expected}, got {type(value).__name__}")

def _string(raw_data: dict, key: str) -> str:
    value = raw_data.get(key)
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise _shape_error(key, "a scalar", value)
    return str(value)

def _strings(raw_data: dict, key: str) -> List[str]:
    value = raw_data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise _shape_error(key, "a list", value)
    if any(isinstance(item, (dict, list)) for item in value):
        raise DataParseError(f"failed to parse data.yaml: \"{key}\" must be a list of scalars")
    return [str(item) for item in value if item is not None]

def _mappings(raw_data: dict, key: str) -> List[dict]:
    value = raw_data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise _shape_error(key, "a list", value)
    if not all(isinstance(item, dict) for item in value):
        raise DataParseError(f"failed to parse data.yaml: \"{key}\" must be a list of mappings")
    return value

def _mapping(raw_data: dict, key: str) -> dict:
    value = raw_data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise _shape_error(key, "a mapping", value)
    return value

class Experience:
    """A single work experience entry."""
    title: str
    company: str
    location: str
    start_date: str
    end_date: str
    current: bool
    highlights: List[str]
    technologies: str

    def __init__(self, raw_data: dict):
        self.title = _string(raw_data, "title")
        self.company = _string(raw_data, "company")
        self.location = _string(raw_data, "location")
        self.start_date = _string(raw_data, "start_date")
        self.end_date = _string(raw_data, "end_date")
        self.current = bool(raw_data.get("current", False))
        self.highlights = _strings(raw_data, "highlights")
        self.technologies = _string(raw_data, "technologies")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "current": self.current,
            "highlights": self.highlights,
            "technologies": self.technologies,
        }

    def __repr__(self):
        return f"<Experience title=\"{self.title}\" company=\"{self.company}\">"

class Skills:
    """Skills grouped by category."""
    CATEGORIES = ("languages", "frontend", "backend", "cloud_devops", "databases", "tools")

    languages: List[str]
    frontend: List[str]
    backend: List[str]
    cloud_devops: List[str]
    databases: List[str]
    tools: List[str]

    def __init__(self, raw_data: dict):
        for category in self.CATEGORIES:
            setattr(self, category, _strings(raw_data, category))

    def categories(self) -> Iterator[Tuple[str, List[str]]]:
        """Yield (category, skills) for every category that has skills."""
        for category in self.CATEGORIES:
            items = getattr(self, category)
            if items:
                yield category, items

    def to_dict(self) -> Dict[str, List[str]]:
        return {category: getattr(self, category) for category in self.CATEGORIES}

class Education:
    school: str
    degree: str
    status: str
    graduation: str

    def __init__(self, raw_data: dict):
        self.school = _string(raw_data, "school")
        self.degree = _string(raw_data, "degree")
        self.status = _string(raw_data, "status")
        self.graduation = _string(raw_data, "graduation")

    def to_dict(self) -> Dict[str, str]:
        return {
            "school": self.school,
            "degree": self.degree,
            "status": self.status,
            "graduation": self.graduation,
        }

class Certification:
    name: str
    issued: str
    expires: str
    credential_id: str

    def __init__(self, raw_data: dict):
        self.name = _string(raw_data, "name")
        self.issued = _string(raw_data, "issued")
        self.expires = _string(raw_data, "expires")
        self.credential_id = _string(raw_data, "credential_id")

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "issued": self.issued,
            "expires": self.expires,
            "credential_id": self.credential_id,
        }

class Resume:
    """The contents of data.yaml: contact details, experience, skills and so on."""
    raw: dict # not recommended to use directly, use attributes instead

    name: str
    title: str
    location: str
    phone: str
    email: str
    linkedin: str
    portfolio: str
    summary: str
    experience: List[Experience]
    skills: Skills
    education: List[Education]
    certifications: List[Certification]

    def __init__(self, raw_data: dict):
        self.raw = raw_data
        self.name = _string(raw_data, "name")
        self.title = _string(raw_data, "title")
        self.location = _string(raw_data, "location")
        self.phone = _string(raw_data, "phone")
        self.email = _string(raw_data, "email")
        self.linkedin = _string(raw_data, "linkedin")
        self.portfolio = _string(raw_data, "portfolio")
        self.summary = _string(raw_data, "summary")
        self.experience = [Experience(item) for item in _mappings(raw_data, "experience")]
        self.skills = Skills(_mapping(raw_data, "skills"))
        self.education = [Education(item) for item in _mappings(raw_data, "education")]
        self.certifications = [Certification(item) for item in _mappings(raw_data, "certifications")]

    @classmethod
    def from_yaml(cls, content: bytes) -> "Resume":
        """Decode data.yaml bytes into a Resume."""
        try:
            raw_data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise DataParseError(f"failed to parse data.yaml: {e}") from e

        if raw_data is None:
            raw_data = {}
        if not isinstance(raw_data, dict):
            raise DataParseError(f"failed to parse data.yaml: expected a mapping, got {type(raw_data).__name__}")
        return cls(raw_data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "location": self.location,
            "phone": self.phone,
            "email": self.email,
            "linkedin": self.linkedin,
            "portfolio": self.portfolio,
            "summary": self.summary,
            "experience": [item.to_dict() for item in self.experience],
            "skills": self.skills.to_dict(),
            "education": [item.to_dict() for item in self.education],
            "certifications": [item.to_dict() for item in self.certifications],
        }

    def __repr__(self):
        return f"<Resume name=\"{self.name}\" experience={len(self.experience)}>"
