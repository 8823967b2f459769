# patients/models/constants.py
# Opções comuns aos modelos de pacientes

STATUS_ATIVO = 'ativo'
STATUS_INATIVO = 'inativo'

STATUS_CHOICES = [
    (STATUS_ATIVO, 'Ativo'),
    (STATUS_INATIVO, 'Inativo'),
]

CPF_REGEX = r'^\d{3}\.\d{3}\.\d{3}-\d{2}$'
