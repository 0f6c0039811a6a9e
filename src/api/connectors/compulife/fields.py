"""Tabela declarativa de campos aceitos por ação da Compulife.

Única fonte de verdade do whitelist: nenhum campo inbound fora da
tabela chega à chamada upstream. Campos de credencial
(COMPULIFEAUTHORIZATIONID, REMOTE_IP) nunca fazem parte do whitelist.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

QUOTE_ACTION = "quote"
HEALTH_ANALYZER_ACTION = "health-analyzer"


@dataclass(frozen=True)
class FieldSpec:
    """Whitelist de uma ação.

    Attributes:
        required_fields: Campos que a Compulife exige (documentação; não validados aqui)
        optional_fields: Campos aceitos quando presentes
        defaults: Valores aplicados somente quando a chave está ausente
        extends: Ação base traduzida antes desta (composição)
    """

    required_fields: tuple[str, ...] = ()
    optional_fields: tuple[str, ...] = ()
    defaults: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    extends: str | None = None

    @property
    def whitelist(self) -> tuple[str, ...]:
        """Campos próprios da ação, sem duplicatas, na ordem declarada."""
        names = (*self.required_fields, *self.optional_fields, *self.defaults)
        return tuple(dict.fromkeys(names))


QUOTE_REQUIRED_FIELDS = (
    "State",
    "BirthMonth",
    "Birthday",
    "BirthYear",
    "Sex",
    "Smoker",
    "Health",
    "NewCategory",
    "FaceAmount",
    "ModeUsed",
)

QUOTE_OPTIONAL_FIELDS = (
    "ZipCode",
    "ErrOnMissingZipCode",
    "Province",
    "UserLocation",
    "CompInc",
    "PrdInc",
    "TableRating",
    "MaxNumResults",
    "FilterOn",
    "RequestType",
    "NoRedX",
)

QUOTE_DEFAULTS = MappingProxyType(
    {
        "SortOverride1": "A",  # ordena por prêmio
        "CompRating": "4",  # filtro de rating A- ou melhor
        "LANGUAGE": "E",
    }
)

# Campos do Health Analyzer (peso/altura, tabaco, pressão, colesterol,
# direção, histórico familiar, abuso de substâncias)
HEALTH_ANALYZER_FIELDS = (
    "DoHeightWeight",
    "Weight",
    "Height",
    "DoSmokingTobacco",
    "DoCigarettes",
    "PeriodCigarettes",
    "NumCigarettes",
    "DoCigars",
    "PeriodCigars",
    "NumCigars",
    "DoPipe",
    "PeriodPipe",
    "DoChewingTobacco",
    "PeriodChewingTobacco",
    "DoNicotinePatchesOrGum",
    "PeriodNicotinePatchesOrGum",
    "DoBloodPressure",
    "Systolic",
    "Dystolic",
    "BloodPressureMedication",
    "PeriodBloodPressure",
    "PeriodBloodPressureControl",
    "DoCholesterol",
    "CholesterolLevel",
    "HDLRatio",
    "CholesterolMedication",
    "PeriodCholesterol",
    "PeriodCholesterolControl",
    "DoDriving",
    "HadDriversLicense",
    "MovingViolations0",
    "MovingViolations1",
    "MovingViolations2",
    "MovingViolations3",
    "MovingViolations4",
    "RecklessConviction",
    "PeriodRecklessConviction",
    "DwiConviction",
    "PeriodDwiConviction",
    "SuspendedConviction",
    "PeriodSuspendedConviction",
    "MoreThanOneAccident",
    "PeriodMoreThanOneAccident",
    "DoFamily",
    "NumDeaths",
    "NumContracted",
    "AgeDied00",
    "AgeDied01",
    "AgeContracted00",
    "AgeContracted01",
    "IsParent00",
    "IsParent01",
    "CVD00",
    "CVD01",
    "CAD00",
    "CAD01",
    "Diabetes00",
    "Diabetes01",
    "BreastCancer00",
    "BreastCancer01",
    "ColonCancer00",
    "ColonCancer01",
    "ProstateCancer00",
    "ProstateCancer01",
    "OtherInternalCancer00",
    "OtherInternalCancer01",
    "DoSubAbuse",
    "Alcohol",
    "AlcYearsSinceTreatment",
    "Drugs",
    "DrugsYearsSinceTreatment",
)

ACTION_FIELDS: Mapping[str, FieldSpec] = MappingProxyType(
    {
        QUOTE_ACTION: FieldSpec(
            required_fields=QUOTE_REQUIRED_FIELDS,
            optional_fields=QUOTE_OPTIONAL_FIELDS,
            defaults=QUOTE_DEFAULTS,
        ),
        HEALTH_ANALYZER_ACTION: FieldSpec(
            optional_fields=HEALTH_ANALYZER_FIELDS,
            extends=QUOTE_ACTION,
        ),
    }
)


def full_whitelist(action: str) -> tuple[str, ...]:
    """Whitelist efetivo da ação, incluindo as ações base encadeadas."""
    spec = ACTION_FIELDS[action]
    own = spec.whitelist
    if spec.extends is None:
        return own
    return tuple(dict.fromkeys((*full_whitelist(spec.extends), *own)))
