"""Despacho de checker por tipo semântico.

O match é exaustivo sobre ValidationKind: um tipo novo sem case
correspondente é apontado pelo type checker via assert_never.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, assert_never

from validation.checkers.documents import check_cep, check_cnpj, check_cpf, check_phone
from validation.checkers.formats import (
    check_base64,
    check_email,
    check_password,
    check_url,
    check_uuid,
)
from validation.checkers.isbn import check_isbn
from validation.checkers.primitives import (
    check_boolean,
    check_date,
    check_json,
    check_number,
    check_string,
)
from validation.kinds import ValidationKind

if TYPE_CHECKING:
    from validation.rules import ValidationRule


def check_value(value: Any, rule: ValidationRule) -> bool:
    """Aplica o checker do tipo da regra ao valor (já transformado).

    Args:
        value: Valor a verificar.
        rule: Regra com kind e limites opcionais.

    Returns:
        True se o valor satisfaz o tipo e seus limites.
    """
    kind = rule.kind
    match kind:
        case ValidationKind.STRING:
            return check_string(value, rule.min, rule.max)
        case ValidationKind.NUMBER:
            return check_number(value, rule.min, rule.max)
        case ValidationKind.BOOLEAN:
            return check_boolean(value)
        case ValidationKind.EMAIL:
            return check_email(value)
        case ValidationKind.URL:
            return check_url(value)
        case ValidationKind.DATE:
            return check_date(value)
        case ValidationKind.CPF:
            return check_cpf(value)
        case ValidationKind.CNPJ:
            return check_cnpj(value)
        case ValidationKind.CEP:
            return check_cep(value)
        case ValidationKind.PHONE:
            return check_phone(value)
        case ValidationKind.ISBN:
            return check_isbn(value)
        case ValidationKind.UUID:
            return check_uuid(value)
        case ValidationKind.JSON:
            return check_json(value)
        case ValidationKind.BASE64:
            return check_base64(value)
        case ValidationKind.PASSWORD:
            return check_password(value, rule.min)
        case _:
            assert_never(kind)
