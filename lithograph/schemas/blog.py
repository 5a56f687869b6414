from typing import List

from pydantic import BaseModel, Field


class FrontMatter(BaseModel):
    title: str
    date: str
    tags: List[str]
    blurb: str


class PostSummary(BaseModel):
    date: str
    title: str
    slug: str
    blurb_html: str
    tags: List[str] = Field(default_factory=list)


class PostDetail(BaseModel):
    slug: str
    title: str
    date: str
    tags: List[str] = Field(default_factory=list)
    body_html: str
