"""Analysis API"""
from fastapi import APIRouter, Depends, HTTPException, status

from article_insight.analyzers.errors import RequestError, SchemaError, ValidationError
from article_insight.api.deps import SESSION_HEADER, get_analysis_service, get_session
from article_insight.schemas import AnalyzeRequest, HistoryEntry
from article_insight.services.analysis_service import AnalysisService
from article_insight.services.session_service import AnalysisSession, SessionBusyError

router = APIRouter()


@router.post("", response_model=HistoryEntry)
async def create_analysis(
    request: AnalyzeRequest,
    session: AnalysisSession = Depends(get_session),
    service: AnalysisService = Depends(get_analysis_service),
):
    """Analyze an article URL or pasted text"""
    headers = {SESSION_HEADER: session.session_id}
    try:
        return await service.submit(session, request.content, request.mode)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc), headers=headers)
    except SessionBusyError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc), headers=headers)
    except SchemaError:
        # The raw response is logged by the analyzer, not returned
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="The analysis service returned an unreadable result",
            headers=headers,
        )
    except RequestError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"The analysis service request failed: {exc}",
            headers=headers,
        )
