"""
Tests for app/validators
"""

from datetime import date

import pytest

from app.exceptions import ValidationError
from app.validators import ChequeValidator, FinanceiroValidator
from app.validators.base import Validator, Number, String, Enum, Date, RuleViolation


class SampleValidator(Validator):
    schema = {
        'quantidade': Number(),
        'referencia': Number(nullable_optional=True),
        'codigo': String(max_length=5),
        'tipo': Enum([1, 2]),
        'vencimento': Date(format='DD/MM/YYYY'),
    }


def _rules(exc_info):
    return {error['field']: error['rule'] for error in exc_info.value.errors}


class TestValidatorRules:
    """Tests for each rule of the base Validator"""

    def test_valid_payload_is_cast(self):
        """Valid payload returns cast values"""
        dados = SampleValidator().validate({
            'quantidade': '12',
            'codigo': ' AB1 ',
            'tipo': '2',
            'vencimento': '31/12/2024',
        })

        assert dados == {
            'quantidade': 12,
            'referencia': None,
            'codigo': 'AB1',
            'tipo': 2,
            'vencimento': date(2024, 12, 31),
        }

    def test_unknown_keys_are_dropped(self):
        """Keys outside the schema never reach the result"""
        dados = SampleValidator().validate({
            'quantidade': 1,
            'codigo': 'X',
            'tipo': 1,
            'vencimento': '01/01/2024',
            'ativo': False,
            'createdBy': 'intruso',
        })

        assert 'ativo' not in dados
        assert 'createdBy' not in dados

    def test_missing_required_fields(self):
        """Every missing required field is reported"""
        with pytest.raises(ValidationError) as exc_info:
            SampleValidator().validate({})

        assert _rules(exc_info) == {
            'quantidade': 'required',
            'codigo': 'required',
            'tipo': 'required',
            'vencimento': 'required',
        }

    def test_empty_string_counts_as_missing(self):
        with pytest.raises(ValidationError) as exc_info:
            SampleValidator().validate({
                'quantidade': 1, 'codigo': '  ', 'tipo': 1, 'vencimento': '01/01/2024'
            })

        assert _rules(exc_info) == {'codigo': 'required'}

    def test_number_rejects_text_and_booleans(self):
        with pytest.raises(ValidationError) as exc_info:
            SampleValidator().validate({
                'quantidade': 'abc', 'referencia': True, 'codigo': 'X', 'tipo': 1,
                'vencimento': '01/01/2024'
            })

        assert _rules(exc_info) == {'quantidade': 'number', 'referencia': 'number'}

    def test_number_accepts_decimal_string(self):
        dados = SampleValidator().validate({
            'quantidade': '100.50', 'codigo': 'X', 'tipo': 1, 'vencimento': '01/01/2024'
        })

        assert dados['quantidade'] == 100.5

    def test_string_max_length(self):
        with pytest.raises(ValidationError) as exc_info:
            SampleValidator().validate({
                'quantidade': 1, 'codigo': 'ABCDEF', 'tipo': 1, 'vencimento': '01/01/2024'
            })

        error = exc_info.value.errors[0]
        assert error['rule'] == 'maxLength'
        assert error['message'] == 'Campo codigo deve possuir tamanho máximo de 5'

    def test_string_rejects_numbers(self):
        with pytest.raises(ValidationError) as exc_info:
            SampleValidator().validate({
                'quantidade': 1, 'codigo': 123, 'tipo': 1, 'vencimento': '01/01/2024'
            })

        assert _rules(exc_info) == {'codigo': 'string'}

    def test_enum_outside_choices(self):
        with pytest.raises(ValidationError) as exc_info:
            SampleValidator().validate({
                'quantidade': 1, 'codigo': 'X', 'tipo': 3, 'vencimento': '01/01/2024'
            })

        error = exc_info.value.errors[0]
        assert error['rule'] == 'enum'
        assert error['message'] == 'Campo tipo deve ser de uma das opções a seguir: (1,2)'

    @pytest.mark.parametrize('valor', ['2024-01-01', '31/02/2024', '1/13/2024', 20240101])
    def test_date_format(self, valor):
        with pytest.raises(ValidationError) as exc_info:
            SampleValidator().validate({
                'quantidade': 1, 'codigo': 'X', 'tipo': 1, 'vencimento': valor
            })

        assert _rules(exc_info) == {'vencimento': 'date.format'}

    def test_payload_must_be_object(self):
        with pytest.raises(ValidationError) as exc_info:
            SampleValidator().validate(['nao', 'e', 'objeto'])

        assert exc_info.value.errors[0]['rule'] == 'object'

    def test_none_payload(self):
        with pytest.raises(ValidationError):
            SampleValidator().validate(None)


class TestChequeValidator:
    """Tests for ChequeValidator schema"""

    def test_valid_cheque(self, cheque_payload):
        dados = ChequeValidator().validate(cheque_payload)

        assert dados['numero'] == 12345
        assert dados['data'] == date(2024, 1, 1)
        assert dados['valor'] == 100.50

    def test_digits_are_optional(self, cheque_payload):
        del cheque_payload['digitoAgencia']
        cheque_payload['digitoConta'] = None

        dados = ChequeValidator().validate(cheque_payload)

        assert dados['digitoAgencia'] is None
        assert dados['digitoConta'] is None

    def test_required_message(self, cheque_payload):
        del cheque_payload['nome']

        with pytest.raises(ValidationError) as exc_info:
            ChequeValidator().validate(cheque_payload)

        assert exc_info.value.errors == [{
            'field': 'nome',
            'rule': 'required',
            'message': 'Campo nome é obrigatório',
        }]


class TestFinanceiroValidator:
    """Tests for FinanceiroValidator schema"""

    def test_valid_financeiro(self, financeiro_payload):
        dados = FinanceiroValidator().validate(financeiro_payload)

        assert dados['tipo'] == 2
        assert dados['chequeId'] is None
        assert dados['fornecedorId'] is None
        assert dados['dataPagamento'] == date(2024, 3, 15)

    def test_numero_documento_too_long(self, financeiro_payload):
        financeiro_payload['numeroDocumento'] = 'X' * 21

        with pytest.raises(ValidationError) as exc_info:
            FinanceiroValidator().validate(financeiro_payload)

        assert _rules(exc_info) == {'numeroDocumento': 'maxLength'}

    def test_descricao_limit(self, financeiro_payload):
        financeiro_payload['descricao'] = 'D' * 150
        assert FinanceiroValidator().validate(financeiro_payload)['descricao'] == 'D' * 150

        financeiro_payload['descricao'] = 'D' * 151
        with pytest.raises(ValidationError):
            FinanceiroValidator().validate(financeiro_payload)

    def test_tipo_outside_enum(self, financeiro_payload):
        financeiro_payload['tipo'] = 3

        with pytest.raises(ValidationError) as exc_info:
            FinanceiroValidator().validate(financeiro_payload)

        assert _rules(exc_info) == {'tipo': 'enum'}

    @pytest.mark.parametrize('origem', [1, 6])
    def test_origem_bounds(self, financeiro_payload, origem):
        financeiro_payload['origem'] = origem
        assert FinanceiroValidator().validate(financeiro_payload)['origem'] == origem

    @pytest.mark.parametrize('origem', [0, 7])
    def test_origem_outside_enum(self, financeiro_payload, origem):
        financeiro_payload['origem'] = origem

        with pytest.raises(ValidationError) as exc_info:
            FinanceiroValidator().validate(financeiro_payload)

        assert _rules(exc_info) == {'origem': 'enum'}

    def test_reports_every_invalid_field(self, financeiro_payload):
        financeiro_payload['tipo'] = 3
        financeiro_payload['numeroDocumento'] = 'X' * 21
        del financeiro_payload['contaId']

        with pytest.raises(ValidationError) as exc_info:
            FinanceiroValidator().validate(financeiro_payload)

        assert set(exc_info.value.fields()) == {'tipo', 'numeroDocumento', 'contaId'}


class TestNumberRule:
    """Tests for Number rule edge cases"""

    @pytest.mark.parametrize('valor', ['NaN', 'nan', 'inf', 'Infinity', '-inf', float('nan'), float('inf'), float('-inf')])
    def test_rejects_non_finite(self, cheque_payload, valor):
        """NaN and infinity are not valid amounts"""
        cheque_payload['valor'] = valor

        with pytest.raises(ValidationError) as exc_info:
            ChequeValidator().validate(cheque_payload)

        assert _rules(exc_info) == {'valor': 'number'}

    @pytest.mark.parametrize('valor', ['1_000', '1e3', '0x10', '12.', '.5'])
    def test_rejects_non_decimal_strings(self, valor):
        with pytest.raises(RuleViolation):
            Number().clean(valor)

    def test_accepts_negative_decimal_string(self):
        assert Number().clean('-10.25') == -10.25

    @pytest.mark.parametrize('valor', [1.5, '1.5'])
    def test_integer_rejects_fraction(self, financeiro_payload, valor):
        """Reference ids must be whole numbers"""
        financeiro_payload['usuarioId'] = valor

        with pytest.raises(ValidationError) as exc_info:
            FinanceiroValidator().validate(financeiro_payload)

        error = exc_info.value.errors[0]
        assert error['rule'] == 'integer'
        assert error['message'] == 'Campo usuarioId deve ser um número inteiro'

    @pytest.mark.parametrize('valor', [7, 7.0, '7', '7.0'])
    def test_integer_accepts_whole_values(self, valor):
        result = Number(integer=True).clean(valor)

        assert result == 7
        assert isinstance(result, int)
