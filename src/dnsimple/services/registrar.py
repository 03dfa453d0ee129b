"""Registrar endpoints: domain transfers."""

from typing import Any

from dnsimple.response import Response
from dnsimple.services.base import ClientService
from dnsimple.structs import DomainTransfer


class RegistrarService(ClientService):
    def transfer_domain(
        self,
        account_id: int | str,
        domain_name: str,
        attributes: dict[str, Any],
        options: dict[str, Any] | None = None,
    ) -> Response[DomainTransfer]:
        """Start transferring a domain into the account.

        Args:
            account_id: Account ID or ``WILDCARD_ACCOUNT``.
            domain_name: The domain to transfer.
            attributes: Transfer attributes. ``registrant_id`` is mandatory,
                ``auth_code`` is required by most TLDs.
            options: Per-call request options.

        Raises:
            ValueError: If ``registrant_id`` is missing. No request is sent.
            ValidationError: If the server rejects the transfer.
        """
        if attributes.get("registrant_id") is None:
            raise ValueError("registrant_id is required to transfer a domain")

        response = self.client.post(
            f"/{account_id}/registrar/domains/{domain_name}/transfers",
            self._with_body(options, attributes),
        )
        return Response(response, DomainTransfer.from_dict(response.json()["data"]))

    def domain_transfer(
        self,
        account_id: int | str,
        domain_name: str,
        transfer_id: int,
        options: dict[str, Any] | None = None,
    ) -> Response[DomainTransfer]:
        """Get a domain transfer.

        Raises:
            NotFoundError: If the transfer does not exist.
        """
        response = self.client.get(f"/{account_id}/registrar/domains/{domain_name}/transfers/{transfer_id}", options)
        return Response(response, DomainTransfer.from_dict(response.json()["data"]))

    def cancel_domain_transfer(
        self,
        account_id: int | str,
        domain_name: str,
        transfer_id: int,
        options: dict[str, Any] | None = None,
    ) -> Response[DomainTransfer]:
        response = self.client.delete(
            f"/{account_id}/registrar/domains/{domain_name}/transfers/{transfer_id}", options
        )
        return Response(response, DomainTransfer.from_dict(response.json()["data"]))
