from fastapi import APIRouter, Depends, HTTPException

from comments.dependencies import ListParams, get_comment_service
from comments.schemas import (
    CommentCreateBody,
    CommentUpdateBody,
    CreateCommentRequest,
    CreateCommentResponse,
    DeleteCommentRequest,
    ListCommentRequest,
    ListCommentResponse,
    UpdateCommentRequest,
    UpdateCommentResponse,
)
from comments.services.comment_service import (
    CommentNotFoundError,
    CommentService,
    InvalidCommentIDError,
)

router = APIRouter(prefix="/api/v1", tags=["comments"])

@router.get("/videos/{video_id}/comments", response_model=ListCommentResponse)
async def list_comments(
    video_id: str,
    params: ListParams = Depends(),
    service: CommentService = Depends(get_comment_service),
):
    return await service.list_comment(
        ListCommentRequest(video_id=video_id, limit=params.limit, offset=params.offset)
    )

@router.post("/comments", status_code=201, response_model=CreateCommentResponse)
async def create_comment(
    data: CommentCreateBody,
    service: CommentService = Depends(get_comment_service),
):
    return await service.create_comment(
        CreateCommentRequest(video_id=data.video_id, content=data.content)
    )

@router.put("/comments/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: str,
    data: CommentUpdateBody,
    service: CommentService = Depends(get_comment_service),
):
    try:
        return await service.update_comment(
            UpdateCommentRequest(id=comment_id, content=data.content)
        )
    except InvalidCommentIDError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except CommentNotFoundError:
        raise HTTPException(status_code=404, detail="Comment not found")

@router.delete("/comments/{comment_id}", status_code=204)
async def delete_comment(
    comment_id: str,
    service: CommentService = Depends(get_comment_service),
):
    try:
        await service.delete_comment(DeleteCommentRequest(id=comment_id))
    except InvalidCommentIDError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except CommentNotFoundError:
        raise HTTPException(status_code=404, detail="Comment not found")
