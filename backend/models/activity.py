from pydantic import BaseModel, Field


class ActivitySummary(BaseModel):
    """Aggregate counts over the trailing window. Rebuilt on every sync."""

    commits: int = Field(default=0, ge=0)
    merged_prs: int = Field(default=0, ge=0)
    reviews: int = Field(default=0, ge=0)
    doc_comments: int = Field(default=0, ge=0)
    issues: int = Field(default=0, ge=0)
    refactor_commits: int = Field(default=0, ge=0)
    new_repos: int = Field(default=0, ge=0)
    large_commits: int = Field(default=0, ge=0)
    thought_fragments: int = Field(default=0, ge=0, le=1)   # uncommitted local work
    fix_commits: int = Field(default=0, ge=0)
    doc_commits: int = Field(default=0, ge=0)
