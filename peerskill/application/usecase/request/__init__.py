"""Skill request use cases."""

from .request_skill import RequestSkillUseCase

__all__ = ["RequestSkillUseCase"]
