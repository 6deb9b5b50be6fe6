"""Pydantic request bodies for API endpoints."""

from pydantic import BaseModel


class UpdateTitle(BaseModel):
    title: str


class TimeInputBody(BaseModel):
    visible: bool


class ConfirmTimeBody(BaseModel):
    hour: int
    minute: int


class AddMission(BaseModel):
    name: str
    duration: int | str


class ReorderMission(BaseModel):
    from_index: int
    to_index: int
