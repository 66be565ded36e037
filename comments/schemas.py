from pydantic import BaseModel, ConfigDict, Field


# --- Wire projection ---

class CommentInfo(BaseModel):
    id: str
    video_id: str
    content: str
    model_config = ConfigDict(frozen=True)


# --- List ---

# Bounds of the int32 wire fields.
INT32_MIN = -2**31
INT32_MAX = 2**31 - 1


class ListCommentRequest(BaseModel):
    video_id: str
    limit: int = Field(0, ge=INT32_MIN, le=INT32_MAX)
    offset: int = Field(0, ge=INT32_MIN, le=INT32_MAX)


class ListCommentResponse(BaseModel):
    comments: list[CommentInfo] = []


# --- Create ---

class CreateCommentRequest(BaseModel):
    video_id: str
    content: str


class CreateCommentResponse(BaseModel):
    id: str


# --- Update ---

class UpdateCommentRequest(BaseModel):
    id: str
    content: str


class UpdateCommentResponse(BaseModel):
    pass


# --- Delete ---

class DeleteCommentRequest(BaseModel):
    id: str


class DeleteCommentResponse(BaseModel):
    pass


# --- HTTP request bodies ---
#
# The message types above accept any string, like the protobuf contract
# they mirror. The HTTP layer is stricter about what it lets through.

class CommentCreateBody(BaseModel):
    video_id: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)


class CommentUpdateBody(BaseModel):
    content: str = Field(min_length=1)


# --- Metrics ---

class MetricsResponse(BaseModel):
    total_comments: int
    total_videos: int
    cache_info: dict = {}
