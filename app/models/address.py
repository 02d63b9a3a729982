from sqlalchemy import Column, String


class AddressMixin:
    cep = Column(String(10), nullable=True)
    address = Column(String, nullable=True)
    address_number = Column(String(20), nullable=True)
    complement = Column(String, nullable=True)
    neighborhood = Column(String, nullable=True)
    city = Column(String, nullable=True)
    state = Column(String(2), nullable=True)
