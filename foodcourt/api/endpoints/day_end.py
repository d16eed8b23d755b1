# foodcourt/api/endpoints/day_end.py
import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session

from foodcourt import schemas
from foodcourt.api import deps
from foodcourt.core.exceptions import DayEndExportError, NotFoundError
from foodcourt.services.day_end_service import XLSX_MEDIA_TYPE, day_end_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    responses={200: {"content": {XLSX_MEDIA_TYPE: {}}}},
    response_class=Response,
)
def run_day_end(db: Session = Depends(deps.get_db)) -> Response:
    """
    Exporta todos os pedidos para uma planilha e depois apaga todos eles.
    Se a exportação falhar, nenhum pedido é apagado.
    """
    try:
        report = day_end_service.run(db)
    except DayEndExportError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    except Exception as e:
        logger.error(f"Erro ao limpar pedidos no fechamento do dia: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="day-end purge failed",
        )

    return Response(
        content=report.content,
        media_type=XLSX_MEDIA_TYPE,
        headers={
            "Content-Disposition": f'attachment; filename="{report.filename}"',
            "X-Orders-Exported": str(report.order_count),
        },
    )


@router.get("/reports", response_model=schemas.DayEndReportList)
def list_day_end_reports() -> Any:
    """
    Lista os backups de fechamento gravados no servidor, mais recentes primeiro.
    """
    return {"directory": day_end_service.reports_dir, "reports": day_end_service.list_reports()}


@router.get("/reports/{filename}", response_class=FileResponse)
def download_day_end_report(filename: str) -> FileResponse:
    try:
        path = day_end_service.report_path(filename)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="report not found")
    return FileResponse(path, media_type=XLSX_MEDIA_TYPE, filename=filename)
