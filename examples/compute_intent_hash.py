#!/usr/bin/env python3
"""
Example of computing the hashes of a cross-chain intent.
"""
import logging
import os

from intentportal_sdk import (
    AddressNormalizer,
    Call,
    Intent,
    NetworkConfig,
    Reward,
    Route,
    TokenAmount,
    get_intent_hash,
    to_native_intent,
)


def main():
    """
    Demonstrate intent hashing for an Optimism -> Solana transfer.

    This example shows how to:
    1. Normalize native addresses to Universal Addresses
    2. Build a Route and Reward
    3. Compute the intent, route and reward hashes
    4. Render the intent back with chain-native addresses
    """
    if os.environ.get("DEBUG"):
        logging.basicConfig(level=logging.DEBUG)

    source = NetworkConfig.get_chain_id("optimism")
    destination = NetworkConfig.get_chain_id("solana")

    # USDC on Solana and Optimism
    solana_usdc = AddressNormalizer.normalize("EPjFWdd5AufqSyqeM2qN1xzybapC8G4wEGGkZwyTDt1v", "SVM")
    optimism_usdc = AddressNormalizer.normalize("0x0b2c639c533813f4aa9d7837caf62653d097ff85", "EVM")
    creator = AddressNormalizer.normalize("0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed", "EVM")

    route = Route(
        salt=os.urandom(32),
        deadline=1_900_000_000,
        portal=NetworkConfig.get_portal_address("solana"),
        tokens=[TokenAmount(token=solana_usdc, amount=1_000_000)],
        calls=[Call(target=solana_usdc, data=b"")],
    )
    reward = Reward(
        deadline=1_900_000_000,
        creator=creator,
        prover=NetworkConfig.get_prover_address("optimism"),
        tokens=[TokenAmount(token=optimism_usdc, amount=1_010_000)],
    )
    intent = Intent(source_chain_id=source, destination=destination, route=route, reward=reward)

    hashes = get_intent_hash(intent)
    print("Hashes:")
    for name, value in hashes.to_hex().items():
        print(f"  {name}: {value}")

    native = to_native_intent(intent)
    print(f"Route portal on Solana: {native['route']['portal']}")
    print(f"Reward creator on Optimism: {native['reward']['creator']}")


if __name__ == "__main__":
    main()
