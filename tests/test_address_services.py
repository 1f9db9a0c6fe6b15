from txintent.services.address import is_evm_address, normalize_chain


def test_normalize_chain_defaults_to_ethereum():
    assert normalize_chain(None) == "ethereum"
    assert normalize_chain(" Ethereum ") == "ethereum"


def test_normalize_chain_aliases():
    assert normalize_chain("eth") == "ethereum"
    assert normalize_chain("BNB") == "bsc"
    assert normalize_chain("base-mainnet") == "base"
    assert normalize_chain("optimism") == "optimism"


def test_evm_address_any_casing():
    assert is_evm_address("0x1234567890abcdef1234567890abcdef12345678") is True
    assert is_evm_address("0x1234567890ABCDEF1234567890ABCDEF12345678") is True
    # mixed case that is not a valid EIP-55 checksum is still accepted
    assert is_evm_address("0x1234567890aBcDeF1234567890AbCdEf12345678") is True


def test_evm_address_rejects_malformed():
    assert is_evm_address("0x1234567890abcdef1234567890abcdef1234567") is False
    assert is_evm_address("1234567890abcdef1234567890abcdef12345678") is False
    assert is_evm_address("0x1234567890abcdef1234567890abcdef1234567g") is False
    assert is_evm_address("USDC") is False
    assert is_evm_address("") is False


def test_evm_address_rejects_non_strings():
    assert is_evm_address(["0x1234567890abcdef1234567890abcdef12345678"]) is False
    assert is_evm_address({"address": "0x1234567890abcdef1234567890abcdef12345678"}) is False
    assert is_evm_address(None) is False
