#!/usr/bin/env python3
"""
End-to-end example: build a genesis for a five node local network.

This script demonstrates:
1. Key generation
2. Genesis assembly
3. Inspection of the produced document
4. Proof of possession verification
"""

from localnet_genesis import assemble_genesis
from localnet_genesis.crypto import generate_node_keys, hex_decode, verify_proof_of_possession
from localnet_genesis.models import GenesisDocument


def main():
    print("=== Localnet Genesis Example ===\n")

    print("Step 1: Generating keys...")
    node_keys = [generate_node_keys() for _ in range(5)]
    print(f"  ✓ {len(node_keys)} validator key sets generated")

    print("\nStep 2: Assembling genesis...")
    genesis_bytes = assemble_genesis(1337, node_keys)
    print(f"  ✓ Genesis assembled ({len(genesis_bytes)} bytes)")

    print("\nStep 3: Inspecting genesis...")
    document = GenesisDocument.from_json(genesis_bytes)
    for staker in document.initial_stakers:
        print(f"  - {staker.node_id}")
    for alloc in document.allocations:
        print(f"  - {alloc.avax_addr}: {alloc.total_amount}")
    print(f"  Embedded chain ID: {document.embedded_chain().config.chain_id}")

    print("\nStep 4: Verifying proofs of possession...")
    for staker in document.initial_stakers:
        valid = verify_proof_of_possession(
            hex_decode(staker.signer.public_key),
            hex_decode(staker.signer.proof_of_possession)
        )
        print(f"  {'✓' if valid else '✗'} {staker.node_id}")

    print("\n=== Done ===")


if __name__ == '__main__':
    main()
