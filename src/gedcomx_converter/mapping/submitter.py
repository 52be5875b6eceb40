from __future__ import annotations

from typing import Any, Optional

from gedcomx_converter.core.context import ConversionContext
from gedcomx_converter.mapping.ids import create_id
from gedcomx_converter.mapping.result import ConversionResult
from gedcomx_converter.model.conclusion import Agent
from gedcomx_converter.records.raw import RawSubmitter


class SubmitterMapper:
    """SUBM record -> dataset contributor Agent."""

    def __init__(self, config: Any = None):
        self.config = config

    def to_contributor(
        self,
        raw: Optional[RawSubmitter],
        result: ConversionResult,
        ctx: ConversionContext,
    ) -> Optional[Agent]:
        if raw is None:
            return None

        with ctx.scope(f"@{raw.id}@ SUBM"):
            agent = Agent(
                id=create_id(raw.id, self.config),
                name=raw.name,
                address=" ".join(raw.address.split()) if raw.address else None,
                homepage=raw.www,
                language=raw.language,
            )
            if raw.phone:
                agent.phones.append(raw.phone)
            if raw.fax:
                agent.faxes.append(raw.fax)
            if raw.email:
                agent.emails.append(raw.email)

            if raw.rin is not None:
                ctx.warn("RIN (%s) was ignored.", raw.rin)
            for ext in raw.extensions:
                ctx.warn("Unsupported (%s): %s", ext.tag, ext)

            result.set_dataset_contributor(agent, raw.change_date)
            return agent
