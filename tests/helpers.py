from sqlalchemy import func, select


def count_rows(db, model):
    return db.scalar(select(func.count()).select_from(model))
