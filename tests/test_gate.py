"""Whitelist mint gate: phase, root and per-address cap checks."""
import pytest

from merkle_whitelist import (
    ClaimDenied,
    ClaimLimitExceeded,
    InvalidMerkleProof,
    MintPhase,
    NotAdmin,
    Whitelist,
    WhitelistGate,
    WhitelistNotLive,
)

from conftest import CHECKSUMMED


@pytest.fixture
def whitelist():
    return Whitelist(CHECKSUMMED[:3])


@pytest.fixture
def gate(admin, whitelist):
    g = WhitelistGate(admin)
    g.set_root(admin, whitelist.root_hex)
    g.set_phase(admin, MintPhase.WHITELIST)
    return g


class TestAdmin:
    def test_only_admin_sets_root(self, admin, whitelist):
        g = WhitelistGate(admin)
        with pytest.raises(NotAdmin):
            g.set_root(CHECKSUMMED[1], whitelist.root)
        assert g.merkle_root is None

    def test_only_admin_sets_phase(self, admin):
        g = WhitelistGate(admin)
        with pytest.raises(NotAdmin):
            g.set_phase(CHECKSUMMED[1], MintPhase.WHITELIST)
        assert g.phase == MintPhase.CLOSED

    def test_admin_matched_case_insensitively(self, admin, whitelist):
        g = WhitelistGate(admin)
        g.set_root(admin.lower(), whitelist.root)
        assert g.merkle_root == whitelist.root

    def test_root_must_be_32_bytes(self, admin):
        g = WhitelistGate(admin)
        with pytest.raises(ValueError):
            g.set_root(admin, "0x1234")


class TestClaim:
    def test_successful_claim(self, gate, whitelist):
        addr = CHECKSUMMED[1]
        assert gate.claim(addr, whitelist.proof_for(addr)) == 1
        assert gate.claimed(addr.lower()) == 1

    def test_not_live(self, admin, whitelist):
        g = WhitelistGate(admin)
        g.set_root(admin, whitelist.root)
        addr = CHECKSUMMED[1]
        with pytest.raises(WhitelistNotLive):
            g.claim(addr, whitelist.proof_for(addr))

        g.set_phase(admin, MintPhase.PUBLIC)
        with pytest.raises(WhitelistNotLive):
            g.claim(addr, whitelist.proof_for(addr))

    def test_unset_root(self, admin, whitelist):
        g = WhitelistGate(admin)
        g.set_phase(admin, MintPhase.WHITELIST)
        with pytest.raises(InvalidMerkleProof):
            g.claim(CHECKSUMMED[1], whitelist.proof_for(CHECKSUMMED[1]))

    def test_proof_for_other_address(self, gate, whitelist):
        # the gate hashes the caller itself; someone else's proof is useless
        with pytest.raises(InvalidMerkleProof):
            gate.claim(CHECKSUMMED[3], whitelist.proof_for(CHECKSUMMED[1]))

    def test_stale_root(self, gate, admin, whitelist):
        addr = CHECKSUMMED[1]
        old_proof = whitelist.proof_for(addr)
        gate.set_root(admin, Whitelist(CHECKSUMMED[1:]).root)

        with pytest.raises(InvalidMerkleProof):
            gate.claim(addr, old_proof)

    def test_cap_enforced(self, gate, whitelist):
        addr = CHECKSUMMED[2]
        proof = whitelist.proof_for(addr)
        gate.claim(addr, proof)
        with pytest.raises(ClaimLimitExceeded):
            gate.claim(addr, proof)
        assert gate.claimed(addr) == 1

    def test_quantity_counts_against_cap(self, admin, whitelist):
        g = WhitelistGate(admin, max_claims_per_address=3)
        g.set_root(admin, whitelist.root)
        g.set_phase(admin, MintPhase.WHITELIST)
        addr = CHECKSUMMED[0]
        proof = whitelist.proof_for(addr)

        assert g.claim(addr, proof, quantity=2) == 2
        with pytest.raises(ClaimLimitExceeded):
            g.claim(addr, proof, quantity=2)
        assert g.claim(addr, proof) == 3

    def test_quantity_must_be_positive(self, gate, whitelist):
        with pytest.raises(ValueError):
            gate.claim(CHECKSUMMED[1], whitelist.proof_for(CHECKSUMMED[1]), quantity=0)

    def test_denials_are_distinguishable(self, gate, admin, whitelist):
        reasons = set()
        addr = CHECKSUMMED[1]
        proof = whitelist.proof_for(addr)

        with pytest.raises(ClaimDenied) as exc:
            gate.claim(CHECKSUMMED[3], proof)
        reasons.add(exc.value.reason)

        gate.claim(addr, proof)
        with pytest.raises(ClaimDenied) as exc:
            gate.claim(addr, proof)
        reasons.add(exc.value.reason)

        gate.set_phase(admin, MintPhase.CLOSED)
        with pytest.raises(ClaimDenied) as exc:
            gate.claim(addr, proof)
        reasons.add(exc.value.reason)

        assert reasons == {
            "invalid_merkle_proof",
            "claim_limit_exceeded",
            "whitelist_not_live",
        }


class TestPublishedProofs:
    """Claims submitted with the hex proofs written to whitelist_proofs.json."""

    def test_hex_proof_accepted(self, gate, whitelist):
        addr = CHECKSUMMED[1]
        assert gate.claim(addr, whitelist.proofs()[addr]) == 1

    def test_hex_proof_for_other_address(self, gate, whitelist):
        with pytest.raises(InvalidMerkleProof):
            gate.claim(CHECKSUMMED[3], whitelist.proofs()[CHECKSUMMED[1]])

    @pytest.mark.parametrize("proof", [["0xzz"], ["0x1234"], None, [b"\x00" * 32, "0x00"]])
    def test_malformed_proof_denied(self, gate, proof):
        with pytest.raises(InvalidMerkleProof):
            gate.claim(CHECKSUMMED[1], proof)
