"""Transaction API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, Response

from finance_tracker.application.dto import CreateTransactionRequest, TransactionDTO
from finance_tracker.application.services import ExportService, TransactionService
from finance_tracker.core.dependencies import (
    CurrentUserId,
    get_export_service,
    get_transaction_service,
)
from finance_tracker.core.metrics import (
    record_csv_export,
    record_sample_seed,
    record_transaction_created,
    record_transaction_deleted,
)
from finance_tracker.presentation.schemas import (
    ErrorResponseSchema,
    TransactionCreateSchema,
    TransactionListSchema,
    TransactionSchema,
)

transactions_router = APIRouter(
    prefix="/transactions",
    responses={
        401: {"model": ErrorResponseSchema, "description": "Missing user identity"},
        503: {"model": ErrorResponseSchema, "description": "Transaction store unavailable"},
    },
)


def _to_schema(dto: TransactionDTO) -> TransactionSchema:
    return TransactionSchema(
        id=dto.id,
        amount=dto.amount,
        category=dto.category,
        type=dto.type,
        date=dto.date,
        description=dto.description,
        created_at=dto.created_at,
    )


@transactions_router.post(
    "",
    response_model=TransactionSchema,
    status_code=201,
    summary="Record Transaction",
    description="Record a new income or expense transaction for the current user.",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid transaction"},
    },
)
async def create_transaction(
    request: TransactionCreateSchema,
    user_id: CurrentUserId,
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> TransactionSchema:
    dto = CreateTransactionRequest(
        user_id=user_id,
        amount=request.amount,
        category=request.category,
        type=request.type,
        date=request.date,
        description=request.description,
    )

    created = await transaction_service.create_transaction(dto)
    record_transaction_created(created.type)

    return _to_schema(created)


@transactions_router.get(
    "",
    response_model=TransactionListSchema,
    summary="List Transactions",
    description="""
    List the current user's transactions.

    Transactions are ordered by date, newest first.
    """,
)
async def list_transactions(
    user_id: CurrentUserId,
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
    limit: Annotated[
        int,
        Query(ge=1, le=500, description="Maximum number of transactions to return"),
    ] = 50,
    offset: Annotated[
        int,
        Query(ge=0, description="Number of transactions to skip"),
    ] = 0,
) -> TransactionListSchema:
    response = await transaction_service.list_transactions(user_id, limit, offset)

    return TransactionListSchema(
        user_id=response.user_id,
        total_count=response.total_count,
        transactions=[_to_schema(t) for t in response.transactions],
    )


@transactions_router.get(
    "/export",
    summary="Export Transactions as CSV",
    description="""
    Download all of the current user's transactions as CSV.

    Columns: Date, Type, Category, Amount, Description. Every data field
    is double-quoted.
    """,
    response_class=Response,
    responses={
        200: {"content": {"text/csv": {}}, "description": "CSV file"},
        400: {"model": ErrorResponseSchema, "description": "No transactions to export"},
    },
)
async def export_transactions(
    user_id: CurrentUserId,
    export_service: Annotated[ExportService, Depends(get_export_service)],
) -> Response:
    export = await export_service.export_csv(user_id)
    record_csv_export(export.row_count)

    return Response(
        content=export.content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )


@transactions_router.post(
    "/sample",
    response_model=list[TransactionSchema],
    status_code=201,
    summary="Add Sample Transactions",
    description="Insert a starter set of sample transactions for the current user.",
)
async def create_sample_transactions(
    user_id: CurrentUserId,
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> list[TransactionSchema]:
    created = await transaction_service.seed_sample_data(user_id)
    record_sample_seed()

    return [_to_schema(t) for t in created]


@transactions_router.delete(
    "/{transaction_id}",
    status_code=204,
    summary="Delete Transaction",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Transaction not found"},
    },
)
async def delete_transaction(
    transaction_id: Annotated[
        UUID,
        Path(description="UUID of the transaction to delete"),
    ],
    user_id: CurrentUserId,
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> Response:
    await transaction_service.delete_transaction(user_id, str(transaction_id))
    record_transaction_deleted()

    return Response(status_code=204)
