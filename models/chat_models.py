"""
Data models for chat processing.
Contains the per-page harvest results merged into PortfolioContent.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class AboutPage:
    """Sections extracted from the about page. None marks a section that was not found."""
    about: Optional[str] = None
    experience: Optional[str] = None
    education: Optional[str] = None
    skills: Optional[str] = None


@dataclass
class HarvestResult:
    """
    Raw output of one harvest pass.
    A page that failed to load stays None and falls back to placeholders on merge.
    """
    about_page: Optional[AboutPage] = None
    projects: Optional[Dict[str, str]] = None
    contact: Optional[Dict[str, str]] = None
    failed_pages: list = field(default_factory=list)
