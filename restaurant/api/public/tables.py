from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session, joinedload

from restaurant.db.session import get_db
from restaurant.models.table import Table, TableType
from restaurant.schemas.common import DataResponse, ListResponse
from restaurant.schemas.table import (
    AvailabilityRequest,
    AvailableTable,
    Table as TableSchema,
    TableType as TableTypeSchema,
)
from restaurant.utils.availability import find_available_tables, validate_window

router = APIRouter(tags=["Tables"])


def serialize_table(table: Table) -> TableSchema:
    return TableSchema(
        table_id=table.table_id,
        table_type_id=table.table_type_id,
        location=table.location,
        capacity=table.capacity,
        table_type=table.table_type.type if table.table_type else None,
    )


def serialize_table_type(table_type: TableType) -> TableTypeSchema:
    return TableTypeSchema(table_type_id=table_type.table_type_id, type=table_type.type)


@router.get("/tables", response_model=ListResponse[TableSchema])
def list_tables(db: Session = Depends(get_db)):
    tables = (
        db.query(Table)
        .options(joinedload(Table.table_type))
        .order_by(Table.table_id)
        .all()
    )
    return ListResponse(count=len(tables), data=[serialize_table(t) for t in tables])


@router.get("/table-types", response_model=ListResponse[TableTypeSchema])
def list_table_types(db: Session = Depends(get_db)):
    types = db.query(TableType).order_by(TableType.table_type_id).all()
    return ListResponse(count=len(types), data=[serialize_table_type(t) for t in types])


# ---------------------------------------------------------------------------
# POST /available-tables
# ---------------------------------------------------------------------------


@router.post("/available-tables", response_model=DataResponse[list[AvailableTable]])
def available_tables(data: AvailabilityRequest, db: Session = Depends(get_db)):
    """
    Tables that can seat `capacity` people on `date` during
    `[startTime, endTime)`.

    - Past dates are rejected.
    - A table is excluded when any reservation on that date overlaps the
      window, cancelled ones included; a reservation ending at the requested start hour
      does not block it.
    - An empty list is a successful answer.
    """
    problem = validate_window(data.on_date, data.start_time, data.end_time, today=date.today())
    if problem:
        raise HTTPException(status_code=400, detail=problem)

    tables = find_available_tables(db, data.on_date, data.start_time, data.end_time, data.capacity)
    return DataResponse(
        data=[
            AvailableTable(
                table_id=t.table_id,
                location=t.location,
                capacity=t.capacity,
                type=t.table_type.type if t.table_type else None,
            )
            for t in tables
        ]
    )
