_PROPOSAL_LIST_FIELDS = """
    id
    dao {
      id
      subdomain
    }
    creator
    metadata
    startDate
    endDate
    executed
    approvalReached
    minApprovals
    plugin {
      onlyListed
    }
    approvals(first: 1000) {
      approver {
        address
      }
    }
"""

_PROPOSAL_DETAIL_FIELDS = """
    createdAt
    creationBlockNumber
    executionDate
    executionBlockNumber
    executionTxHash
    actions {
      to
      value
      data
    }
"""

QUERY_MULTISIG_PROPOSAL = f"""
query MultisigProposal($proposalId: ID!) {{
  multisigProposal(id: $proposalId) {{{_PROPOSAL_LIST_FIELDS}{_PROPOSAL_DETAIL_FIELDS}  }}
}}
"""

QUERY_MULTISIG_PROPOSALS = f"""
query MultisigProposals($where: MultisigProposal_filter!, $limit: Int!, $skip: Int!, $direction: OrderDirection!, $sortBy: MultisigProposal_orderBy!) {{
  multisigProposals(where: $where, first: $limit, skip: $skip, orderDirection: $direction, orderBy: $sortBy) {{{_PROPOSAL_LIST_FIELDS}  }}
}}
"""

QUERY_MULTISIG_SETTINGS = """
query MultisigSettings($address: ID!) {
  multisigPlugin(id: $address) {
    onlyListed
    minApprovals
  }
}
"""

QUERY_MULTISIG_MEMBERS = """
query MultisigMembers($address: String!) {
  multisigApprovers(where: { plugin: $address }, first: 1000) {
    address
    isActive
  }
}
"""
