from typing import Tuple

from utils.exceptions import InvalidVotingModeError

from governance.codecs.ratio_codec import decode_ratio, encode_ratio
from governance.models.proposal import MultisigVotingSettings, VotingMode, VotingSettings

# Order of MajorityVotingBase.VotingMode
VOTING_MODE_TO_CONTRACT = {
    VotingMode.STANDARD: 0,
    VotingMode.EARLY_EXECUTION: 1,
    VotingMode.VOTE_REPLACEMENT: 2,
}
CONTRACT_TO_VOTING_MODE = {value: key for key, value in VOTING_MODE_TO_CONTRACT.items()}

VotingSettingsTuple = Tuple[int, int, int, int, int]

# ABI types of the settings tuples in plugin installation data
VOTING_SETTINGS_TYPE = "(uint8,uint64,uint64,uint64,uint256)"
MULTISIG_SETTINGS_TYPE = "(bool,uint16)"


def parse_voting_mode(mode) -> VotingMode:
    try:
        return VotingMode(mode)
    except ValueError:
        raise InvalidVotingModeError(mode) from None


def voting_mode_to_contract(mode) -> int:
    return VOTING_MODE_TO_CONTRACT[parse_voting_mode(mode)]


def voting_mode_from_contract(value: int) -> VotingMode:
    try:
        return CONTRACT_TO_VOTING_MODE[value]
    except KeyError:
        raise InvalidVotingModeError(value) from None


def voting_settings_to_contract(settings: VotingSettings, digits: int) -> VotingSettingsTuple:
    """(votingMode, supportThreshold, minParticipation, minDuration, minProposerVotingPower)"""
    return (
        voting_mode_to_contract(settings.voting_mode),
        encode_ratio(settings.support_threshold, digits),
        encode_ratio(settings.min_participation, digits),
        settings.min_duration,
        settings.min_proposer_voting_power,
    )


def voting_settings_from_contract(values: VotingSettingsTuple, digits: int) -> VotingSettings:
    voting_mode, support_threshold, min_participation, min_duration, min_proposer_voting_power = values
    return VotingSettings(
        voting_mode=voting_mode_from_contract(voting_mode),
        support_threshold=decode_ratio(support_threshold, digits),
        min_participation=decode_ratio(min_participation, digits),
        min_duration=min_duration,
        min_proposer_voting_power=min_proposer_voting_power,
    )


def multisig_settings_to_contract(settings: MultisigVotingSettings) -> Tuple[bool, int]:
    return settings.only_listed, settings.min_approvals


def multisig_settings_from_contract(values: Tuple[bool, int]) -> MultisigVotingSettings:
    only_listed, min_approvals = values
    return MultisigVotingSettings(only_listed=only_listed, min_approvals=min_approvals)
