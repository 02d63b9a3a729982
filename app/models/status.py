import enum


class VehicleStatus(str, enum.Enum):
    PRE_ESTOQUE = "pre_estoque"
    EM_ESTOQUE = "em_estoque"
    DESPACHADO = "despachado"
    ENTREGUE = "entregue"
    RETIRADO = "retirado"


class CollectStatus(str, enum.Enum):
    EM_TRANSITO = "em_transito"
    AGUARDANDO_CHECKOUT = "aguardando_checkout"
    FINALIZADA = "finalizada"


class TransportStatus(str, enum.Enum):
    PENDENTE = "pendente"
    EM_TRANSITO = "em_transito"
    AGUARDANDO_SAIDA = "aguardando_saida"
    ENTREGUE = "entregue"
    CANCELADO = "cancelado"


class NotificationStatus(str, enum.Enum):
    PENDENTE = "pendente"
    ACEITO = "aceito"
    RECUSADO = "recusado"


class SettlementStatus(str, enum.Enum):
    PENDENTE = "pendente"
    ENVIADO = "enviado"
    DEVOLVIDO = "devolvido"
    APROVADO = "aprovado"
    ASSINADO = "assinado"
