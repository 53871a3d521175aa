from pydantic import BaseModel, Field, field_validator

from pitch_craft.pipeline.records import StartupData


class GenerateRequest(BaseModel):
    name: str = Field(..., min_length=1, description="Startup name, must not be blank.")
    problem: list[str] = Field(default_factory=lambda: [""], description="Problem bullet points.")
    solution: list[str] = Field(default_factory=lambda: [""], description="Solution bullet points.")
    target: list[str] = Field(default_factory=lambda: [""], description="Target audience bullet points.")
    unique: list[str] = Field(default_factory=lambda: [""], description="Differentiator bullet points.")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    def to_startup_data(self) -> StartupData:
        return StartupData(
            name=self.name,
            problem=tuple(self.problem),
            solution=tuple(self.solution),
            target=tuple(self.target),
            unique=tuple(self.unique),
        )


class RevenueModelSchema(BaseModel):
    name: str
    description: str


class PitchSchema(BaseModel):
    elevator_pitch: str
    tagline: str
    value_proposition: str
    slide_points: list[str]
    competitors: list[str]
    revenue_models: list[RevenueModelSchema]


class SectionSchema(BaseModel):
    id: str
    title: str
    description: str
    content: str


class GenerateResponse(BaseModel):
    pitch: PitchSchema | None
    industry: str | None
    sections: list[SectionSchema]
    meta: dict


class ClassifyResponse(BaseModel):
    industry: str
