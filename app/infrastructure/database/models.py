"""
Modelos de banco de dados (ORM).
"""
from sqlalchemy import Column, String, Integer, DateTime, Date
from sqlalchemy.sql import func

from app.infrastructure.database.session import Base


class AdminModel(Base):
    """
    Conta de administrador.
    Criada fora da API (scripts/create_admin.py); a API apenas le.
    """

    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)

    def __repr__(self):
        return f"<Admin(id={self.id}, username={self.username})>"


class CultoModel(Base):
    """
    Post de culto com imagem hospedada no Cloudinary.

    imagem_path guarda a URL publica e public_id o identificador usado para
    remover a imagem remota.
    """

    __tablename__ = "cultos"

    id = Column(Integer, primary_key=True, index=True)
    titulo = Column(String(255), nullable=False)
    imagem_path = Column(String(500), nullable=False)
    public_id = Column(String(255), nullable=True)
    criado_em = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Culto(id={self.id}, titulo={self.titulo})>"


class AgendaModel(Base):
    """Evento da agenda da igreja."""

    __tablename__ = "agenda"

    id = Column(Integer, primary_key=True, index=True)
    titulo = Column(String(255), nullable=False)
    data_evento = Column(Date, nullable=False, index=True)
    horario = Column(String(5), nullable=False)  # HH:MM
    local = Column(String(255), nullable=False)

    def __repr__(self):
        return f"<Agenda(id={self.id}, titulo={self.titulo}, data={self.data_evento})>"
