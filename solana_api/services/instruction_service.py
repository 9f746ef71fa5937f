"""Construction of SPL token and System program instructions.

Nothing here talks to a cluster: instructions are built from the supplied
addresses and returned for the caller to put into a transaction.
"""

from typing import Callable, TypeVar

from solders.instruction import Instruction
from solders.system_program import TransferParams, transfer
from spl.token.constants import TOKEN_PROGRAM_ID
from spl.token.instructions import initialize_mint, mint_to, transfer_checked
from spl.token.models import InitializeMintParams, MintToParams, TransferCheckedParams

from solana_api.constants import PUBKEY_LENGTH, TRANSFER_CHECKED_DECIMALS
from solana_api.services.base_service import BaseService
from solana_api.utils.errors import InstructionBuildError
from solana_api.utils.validation import parse_pubkey

P = TypeVar("P")

# tag, decimals, mint authority, then the freeze authority option flag
INITIALIZE_MINT_NO_FREEZE_LEN = 1 + 1 + PUBKEY_LENGTH + 1


def without_freeze_authority(ix: Instruction) -> Instruction:
    """Drop the zero-filled freeze authority key from InitializeMint data.

    spl.token always packs a 32-byte freeze authority slot. When the option
    flag is unset the token program only reads the flag, so the canonical
    encoding ends there.
    """
    data = bytes(ix.data)
    if data[INITIALIZE_MINT_NO_FREEZE_LEN - 1] != 0:
        return ix
    return Instruction(ix.program_id, data[:INITIALIZE_MINT_NO_FREEZE_LEN], ix.accounts)


class InstructionService(BaseService):
    """Builds token and lamport transfer instructions."""

    def _build(self, name: str, builder: Callable[[P], Instruction], params: P) -> Instruction:
        """Run an instruction builder, turning its failures into InstructionBuildError."""
        try:
            return builder(params)
        except Exception as e:
            self.logger.warning(f"{name} instruction rejected: {e}")
            raise InstructionBuildError(str(e), details={"instruction": name}) from e

    def initialize_mint(self, mint: str, mint_authority: str, decimals: int) -> Instruction:
        """Build an InitializeMint instruction with no freeze authority.

        Args:
            mint: Base58 mint address
            mint_authority: Base58 mint authority
            decimals: Token decimal places

        Raises:
            InvalidPublicKeyError: If an address does not parse, mint first
            InstructionBuildError: If the builder rejects the arguments
        """
        mint_pubkey = parse_pubkey(mint, "mint")
        authority_pubkey = parse_pubkey(mint_authority, "mintAuthority")

        ix = self._build(
            "InitializeMint",
            initialize_mint,
            InitializeMintParams(
                decimals=decimals,
                program_id=TOKEN_PROGRAM_ID,
                mint=mint_pubkey,
                mint_authority=authority_pubkey,
                freeze_authority=None,
            ),
        )
        return without_freeze_authority(ix)

    def mint_to(self, mint: str, destination: str, authority: str, amount: int) -> Instruction:
        """Build a MintTo instruction signed by a single authority.

        Raises:
            InvalidPublicKeyError: If mint, destination or authority does not parse
            InstructionBuildError: If the builder rejects the arguments
        """
        mint_pubkey = parse_pubkey(mint, "mint")
        destination_pubkey = parse_pubkey(destination, "destination")
        authority_pubkey = parse_pubkey(authority, "authority")

        return self._build(
            "MintTo",
            mint_to,
            MintToParams(
                program_id=TOKEN_PROGRAM_ID,
                mint=mint_pubkey,
                dest=destination_pubkey,
                mint_authority=authority_pubkey,
                amount=amount,
                signers=[],
            ),
        )

    def transfer_sol(self, from_pubkey: str, to_pubkey: str, lamports: int) -> Instruction:
        """Build a System program lamport transfer.

        Raises:
            InvalidPublicKeyError: If either address does not parse
        """
        sender = parse_pubkey(from_pubkey, "'from'")
        recipient = parse_pubkey(to_pubkey, "'to'")

        return transfer(TransferParams(from_pubkey=sender, to_pubkey=recipient, lamports=lamports))

    def transfer_token(self, destination: str, mint: str, owner: str, amount: int) -> Instruction:
        """Build a TransferChecked instruction.

        The owner is used as both the source account and the authority, and
        decimals is always TRANSFER_CHECKED_DECIMALS.

        Raises:
            InvalidPublicKeyError: If destination, mint or owner does not parse
            InstructionBuildError: If the builder rejects the arguments
        """
        destination_pubkey = parse_pubkey(destination, "destination")
        mint_pubkey = parse_pubkey(mint, "mint")
        owner_pubkey = parse_pubkey(owner, "owner")

        return self._build(
            "TransferChecked",
            transfer_checked,
            TransferCheckedParams(
                program_id=TOKEN_PROGRAM_ID,
                source=owner_pubkey,
                mint=mint_pubkey,
                dest=destination_pubkey,
                owner=owner_pubkey,
                amount=amount,
                decimals=TRANSFER_CHECKED_DECIMALS,
                signers=[],
            ),
        )
