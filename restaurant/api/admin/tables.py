from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from restaurant.db.session import get_db
from restaurant.api.deps import get_current_admin_user
from restaurant.api.public.tables import serialize_table, serialize_table_type
from restaurant.models.reservation import Reservation
from restaurant.models.table import Table, TableType
from restaurant.models.user import User
from restaurant.schemas.common import DataResponse, MessageResponse
from restaurant.schemas.table import (
    Table as TableSchema,
    TableCreate,
    TableType as TableTypeSchema,
    TableTypeCreate,
)

router = APIRouter(prefix="/tables", tags=["Admin - Tables"])
table_type_router = APIRouter(prefix="/table-types", tags=["Admin - Table Types"])


# ---------------------------------------------------------------------------
# Table CRUD
# ---------------------------------------------------------------------------


@router.post("", response_model=DataResponse[TableSchema], status_code=status.HTTP_201_CREATED)
def create_table(
    data: TableCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    table_type = db.query(TableType).filter(TableType.table_type_id == data.table_type_id).first()
    if not table_type:
        raise HTTPException(status_code=404, detail="Table type not found")

    table = Table(**data.model_dump())
    db.add(table)
    db.commit()
    db.refresh(table)
    return DataResponse(message="Table created successfully", data=serialize_table(table))


@router.delete("/{table_id}", response_model=MessageResponse)
def delete_table(
    table_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    table = db.query(Table).filter(Table.table_id == table_id).first()
    if not table:
        raise HTTPException(status_code=404, detail="Table not found")
    if db.query(Reservation.reservation_id).filter(Reservation.table_id == table_id).first():
        raise HTTPException(status_code=400, detail="Cannot delete table with existing reservations")

    db.delete(table)
    db.commit()
    return MessageResponse(message="Table deleted successfully")


# ---------------------------------------------------------------------------
# Table type CRUD
# ---------------------------------------------------------------------------


@table_type_router.post("", response_model=DataResponse[TableTypeSchema], status_code=status.HTTP_201_CREATED)
def create_table_type(
    data: TableTypeCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    table_type = TableType(type=data.type)
    db.add(table_type)
    db.commit()
    db.refresh(table_type)
    return DataResponse(message="Table type created successfully", data=serialize_table_type(table_type))


@table_type_router.delete("/{table_type_id}", response_model=MessageResponse)
def delete_table_type(
    table_type_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    table_type = db.query(TableType).filter(TableType.table_type_id == table_type_id).first()
    if not table_type:
        raise HTTPException(status_code=404, detail="Table type not found")
    if db.query(Table.table_id).filter(Table.table_type_id == table_type_id).first():
        raise HTTPException(status_code=400, detail="Cannot delete table type that is in use by tables")

    db.delete(table_type)
    db.commit()
    return MessageResponse(message="Table type deleted successfully")
