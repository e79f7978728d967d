# Importa na ordem das dependências
from .base import BaseModel
from .empresa import Empresa
from .transacao import Transacao
from .estoque import Estoque
from .analise import AnaliseDiscrepancia
