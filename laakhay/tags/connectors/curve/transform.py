"""Turn Curve pool records into contract tags."""

from __future__ import annotations

from collections.abc import Iterable

from ...core import DiagnosticSink, LoggingDiagnostics
from ...models import ContractTag, PoolRecord
from ...utils.text import is_invalid, truncate
from .config import NAME_TAG_MAX_LENGTH, NAME_TAG_SUFFIX, PROJECT_NAME, WEBSITE_URL


def pool_to_tag(chain_id: str, pool: PoolRecord) -> ContractTag:
    token = pool.output_token
    return ContractTag(
        contract_address=f"eip155:{chain_id}:{token.id}",
        public_name_tag=truncate(token.symbol, NAME_TAG_MAX_LENGTH) + NAME_TAG_SUFFIX,
        project_name=PROJECT_NAME,
        website_link=WEBSITE_URL,
        public_note=(
            f"The liquidity pool token contract for the {token.symbol} "
            f"({token.name}) pool on {PROJECT_NAME}."
        ),
    )


def pools_to_tags(
    chain_id: str,
    pools: Iterable[PoolRecord],
    diagnostics: DiagnosticSink | None = None,
) -> list[ContractTag]:
    """Build tags for pools whose token symbol passes validation.

    Pools with a blank symbol or one containing markup are skipped and
    reported through ``diagnostics``. Order of the input is preserved.
    """
    sink = diagnostics or LoggingDiagnostics()
    tags = []
    for pool in pools:
        token = pool.output_token
        if is_invalid(token.symbol):
            sink.emit(
                "record_rejected",
                chain_id=chain_id,
                token_id=token.id,
                token_name=token.name,
                symbol=token.symbol,
            )
            continue
        tags.append(pool_to_tag(chain_id, pool))
    return tags
