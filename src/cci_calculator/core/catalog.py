"""Cyber Capability Index (CCI) parameter catalog.

Contains the 23 weighted measures of the SEBI Cybersecurity and Cyber
Resilience Framework (CSCRF) self-assessment. Each definition carries its
measure code, formula, target rule, weightage, and the help text shown to
assessors. Weightages across the catalog sum to exactly 100, so the
composite index is expressed on a 0-100 scale without further normalisation.

The catalog is an immutable template. Assessments work on independent
copies created by ``cci_calculator.core.parameters.new_working_set``.

Framework domains:
    Governance  - roles, policy, risk management strategy, supply chain
    Identify    - asset management and risk assessment
    Protect     - identity and access, training, data security, maintenance
    Detect      - continuous monitoring and SOC efficacy
    Respond     - incident management and communications
    Recover     - recovery planning and contingency testing
"""

from dataclasses import dataclass
from enum import IntEnum


class UnsupportedTargetError(ValueError):
    """Raised when a numeric target has no scoring rule."""


class TargetRule(IntEnum):
    """Scoring rule selected by a parameter's target percentage.

    HIGHER_IS_BETTER:   target 100, score is the percentage capped at 100.
    LOWER_IS_BETTER:    target 0, score is 100 minus the percentage.
    HALF_COVERAGE_FULL: target 50, 50% coverage already earns full credit.
    """

    HIGHER_IS_BETTER = 100
    LOWER_IS_BETTER = 0
    HALF_COVERAGE_FULL = 50

    @classmethod
    def from_target(cls, target: float) -> "TargetRule":
        """Resolve a numeric target into its scoring rule.

        Args:
            target: Target percentage as written in the measure definition.

        Returns:
            The matching TargetRule.

        Raises:
            UnsupportedTargetError: If the target is not 0, 50, or 100.
        """
        try:
            return cls(target)
        except ValueError as exc:
            raise UnsupportedTargetError(
                f"target must be one of 0, 50 or 100, got {target!r}"
            ) from exc


@dataclass(frozen=True)
class ParameterDefinition:
    """A single CCI measure as published in the framework.

    Attributes:
        id: Unique numeric identifier (1-23).
        measure_id: CSCRF measure code. Not unique across the catalog.
        title: Short human-readable measure title.
        description: What the percentage expresses.
        formula: The published numerator/denominator formula.
        target: Scoring rule for the measure.
        weightage: Share of the 100-point composite index.
        control_info: The information security goal behind the measure.
        implementation_evidence: Evidence an auditor expects to see.
        framework_category: '<Domain>: <Sub-category>' grouping label.
        numerator_help: Guidance for counting the numerator.
        denominator_help: Guidance for counting the denominator.
    """

    id: int
    measure_id: str
    title: str
    description: str
    formula: str
    target: TargetRule
    weightage: float
    control_info: str
    implementation_evidence: str
    framework_category: str
    numerator_help: str = ""
    denominator_help: str = ""


CCI_PARAMETERS: list[ParameterDefinition] = [
    ParameterDefinition(
        id=1,
        measure_id="GV.RR.S4",
        title="Security Budget Measure",
        description=(
            "Percentage (%) of the organisation's information system budget "
            "devoted to information security."
        ),
        formula=(
            "(Information security budget / total organisation's information "
            "technology budget) x 100"
        ),
        target=TargetRule.HIGHER_IS_BETTER,
        weightage=8,
        control_info=(
            "Information Security Goal: Provide resources necessary for "
            "information systems."
        ),
        implementation_evidence=(
            "1. Total information security budget across all organization's systems.\n"
            "2. Total information technology budget across all organization's systems.\n"
            "3. Approval Document from Competent Authority for the same."
        ),
        framework_category="Governance: Roles and Responsibilities",
        numerator_help=(
            "Total information security budget including security tools, security "
            "personnel, security training, security audits, and other "
            "security-related expenses"
        ),
        denominator_help=(
            "Total IT budget including all expenses related to software, hardware, "
            "IT personnel, and IT services"
        ),
    ),
    ParameterDefinition(
        id=2,
        measure_id="DE.CM.S5",
        title="Vulnerability Measure",
        description=(
            "Percentage of vulnerabilities mitigated pertaining to organization in "
            "a specified time frame."
        ),
        formula="(Number of vulnerabilities mitigated / Number of vulnerabilities identified) x 100",
        target=TargetRule.HIGHER_IS_BETTER,
        weightage=18,
        control_info=(
            "Objective of this measure is to ensure that the vulnerabilities in "
            "organization's systems are identified and mitigated."
        ),
        implementation_evidence=(
            "1. Confirmation that VAPT is done by CERT-In empanelled IS auditing "
            "organization and as per the scope prescribed by SEBI.\n"
            "2. VAPT report and its closure report.\n"
            "3. Time taken to close the identified vulnerabilities."
        ),
        framework_category="Detect: Continuous Monitoring",
        numerator_help=(
            "Total number of vulnerabilities that have been successfully remediated "
            "within the specified timeframe"
        ),
        denominator_help=(
            "Total number of vulnerabilities identified through VAPT, scanning and "
            "other vulnerability identification methods"
        ),
    ),
    ParameterDefinition(
        id=3,
        measure_id="PR.AT.S1",
        title="Security Training Measure",
        description=(
            "Percentage (%) of information system security personnel that have "
            "received security training within the past one year."
        ),
        formula=(
            "(Number of information system security personnel that have completed "
            "security training within the past year / total number of information "
            "system security personnel) x 100"
        ),
        target=TargetRule.HIGHER_IS_BETTER,
        weightage=5,
        control_info=(
            "Information Security Goal: Ensure that organization's personnel are "
            "adequately trained to carry out their assigned information "
            "security-related duties and responsibilities."
        ),
        implementation_evidence=(
            "1. Details of the training/awareness sessions scheduled within the past 1 year.\n"
            "2. Cyber audit observation against Standard 1 mentioned in 'Protect: "
            "Awareness and Training' header in CSCRF Part-I and respective "
            "guidelines in Part-II."
        ),
        framework_category="Protect: Awareness and Training",
        numerator_help=(
            "Number of information security personnel who have completed required "
            "security training programs within the last 12 months"
        ),
        denominator_help="Total number of information security personnel in the organization",
    ),
    ParameterDefinition(
        id=4,
        measure_id="PR.AA.S12",
        title="Remote Access Control Measure",
        description="Percentage (%) of remote users logging through MFA.",
        formula="(Number of remote users logging through MFA / total number of remote users) x 100",
        target=TargetRule.HIGHER_IS_BETTER,
        weightage=2,
        control_info=(
            "Information Security Goal: Restrict access to information, systems, and "
            "components to individuals or machines that have been authenticated and "
            "are identifiable, known and credible."
        ),
        implementation_evidence=(
            "1. Automated record that identifies all remote access points.\n"
            "2. IDS or IPS monitoring of traffic traversing remote access points.\n"
            "3. Review of audit logs associated with all remote access points.\n"
            "4. Evidence of users who are allowed remote access through MFA, "
            "validated through Firewall, AD, or any dedicated system."
        ),
        framework_category="Protect: Identity Management, Authentication, and Access Control",
    ),
    ParameterDefinition(
        id=5,
        measure_id="DE.CM.S1",
        title="Audit Record Review Measure",
        description="Percentage (%) of critical systems integrated with SIEM.",
        formula=(
            "(Number of critical systems integrated with SIEM tool / total number of "
            "critical systems) x 100"
        ),
        target=TargetRule.HIGHER_IS_BETTER,
        weightage=2,
        control_info=(
            "Information Security Goal: Create, protect, and retain information "
            "system audit records to the extent needed to enable the monitoring, "
            "analysis, investigation, and reporting of unlawful, unauthorized, "
            "suspicious or abnormal activity."
        ),
        implementation_evidence=(
            "1. Is logging activated on the system?\n"
            "2. Clearly defined criteria for what constitutes evidence of "
            "\"suspicious or abnormal\" activity within system audit logs.\n"
            "3. Number of system audit logs reviewed for the past six months for "
            "suspicious or abnormal activity."
        ),
        framework_category="Detect: Continuous Monitoring",
    ),
    ParameterDefinition(
        id=6,
        measure_id="DE.CM.S5",
        title="Configuration Changes Measure",
        description=(
            "Percentage (%) approved and implemented configuration changes "
            "identified in the latest automated baseline configuration."
        ),
        formula=(
            "(Number of approved and implemented configuration changes identified in "
            "the latest automated baseline configuration / total number of "
            "configuration changes identified through automated or manual scans) x 100"
        ),
        target=TargetRule.HIGHER_IS_BETTER,
        weightage=2,
        control_info=(
            "Information Security Goal: Establish and maintain baseline configuration "
            "and inventories of organizational information systems throughout the "
            "respective system development life cycles."
        ),
        implementation_evidence=(
            "1. Organizationally approved process for managing configuration changes.\n"
            "2. Automated scanning to identify implemented configuration changes.\n"
            "3. Number of change control requests approved and implemented over the "
            "last reporting period."
        ),
        framework_category="Detect: Continuous Monitoring",
    ),
    ParameterDefinition(
        id=7,
        measure_id="RS.MA.S3",
        title="Contingency Plan Testing Measure",
        description=(
            "Percentage (%) of information systems that have conducted contingency "
            "plan testing at least once in a year."
        ),
        formula=(
            "(Number of information systems that have conducted contingency plans "
            "testing at least once in a year / number of information systems in the "
            "system inventory) x 100"
        ),
        target=TargetRule.HIGHER_IS_BETTER,
        weightage=4,
        control_info=(
            "Information Security Goal: Establish, maintain, and effectively implement "
            "plans for emergency response, backup operations, and post-disaster "
            "recovery of organizational information systems."
        ),
        implementation_evidence=(
            "1. Number of information systems in the system inventory.\n"
            "2. Number of information systems with an approved contingency plan.\n"
            "3. Number of contingency plans successfully tested within the past 1 year.\n"
            "4. Reports of the contingency plan testing conducted in past one year."
        ),
        framework_category="Recover: Recovery Planning",
    ),
    ParameterDefinition(
        id=8,
        measure_id="PR.AA.S7",
        title="User Accounts Measure",
        description="Percentage (%) of privileged access through PIM.",
        formula="(Number of systems accessed through PIM / total number of systems) x 100",
        target=TargetRule.HIGHER_IS_BETTER,
        weightage=3,
        control_info=(
            "Information Security Goal: All privilege users are identified and "
            "authenticated in accordance with information security policy."
        ),
        implementation_evidence=(
            "1. Documented and approved access control policy for systems, "
            "applications, networks and databases.\n"
            "2. Number of users with access to the system.\n"
            "3. Number of users with access to shared accounts."
        ),
        framework_category="Protect: Identity Management, Authentication, and Access Control",
        numerator_help=(
            "Number of systems with privileged access managed through a Privileged "
            "Identity Management (PIM) solution"
        ),
        denominator_help="Total number of systems in the organization that require privileged access",
    ),
    ParameterDefinition(
        id=9,
        measure_id="RS.CO.S2",
        title="Incident Response Measure",
        description="Percentage (%) of incidents reported within required time frame.",
        formula="(Number of incidents reported on time / total number of reported incidents) x 100",
        target=TargetRule.HIGHER_IS_BETTER,
        weightage=2,
        control_info=(
            "Information Security Goal: Track, document, and report incidents to "
            "appropriate organizational officials and/or authorities."
        ),
        implementation_evidence=(
            "1. Number of incidents reported during the period.\n"
            "2. Number of those incidents reported within the prescribed time frame."
        ),
        framework_category="Respond: Communications",
    ),
    ParameterDefinition(
        id=10,
        measure_id="PR.MA.S1",
        title="Maintenance Measure",
        description=(
            "Percentage (%) of system components that undergo maintenance in "
            "accordance with planned maintenance schedules."
        ),
        formula=(
            "(Number of system components that undergo maintenance according to "
            "planned maintenance schedules / total number of system components) x 100"
        ),
        target=TargetRule.HIGHER_IS_BETTER,
        weightage=5,
        control_info=(
            "Information Security Goal: Perform periodic and timely maintenance on "
            "organizational information systems."
        ),
        implementation_evidence=(
            "1. Planned maintenance schedule for the system.\n"
            "2. Number of components contained within the system.\n"
            "3. Number of components maintained in accordance with the schedule."
        ),
        framework_category="Protect: Maintenance",
    ),
    ParameterDefinition(
        id=11,
        measure_id="PR.AA.S14",
        title="Media Sanitization Measure",
        description="Percentage (%) of media that passes sanitization procedures testing.",
        formula=(
            "(Number of media that passes sanitization procedures testing / total "
            "number of media disposed or released for reuse) x 100"
        ),
        target=TargetRule.HIGHER_IS_BETTER,
        weightage=2,
        control_info=(
            "Information Security Goal: Sanitize or destroy information system media "
            "before disposal or release for reuse."
        ),
        implementation_evidence=(
            "1. Policy/procedure for sanitizing media before it is discarded or reused.\n"
            "2. Indicative proof that policy is being followed."
        ),
        framework_category="Protect: Identity Management, Authentication, and Access Control",
    ),
    ParameterDefinition(
        id=12,
        measure_id="PR.AA.S10",
        title="Physical Security Incidents Measure",
        description=(
            "Percentage (%) of physical security incidents allowing unauthorized "
            "entry into facilities containing information systems."
        ),
        formula=(
            "(Number of physical security incidents allowing unauthorized entry into "
            "facilities containing information systems / total number of physical "
            "security incidents) x 100"
        ),
        target=TargetRule.LOWER_IS_BETTER,
        weightage=1,
        control_info=(
            "Information Security Goal: Integrate physical and information security "
            "protection mechanisms to ensure appropriate protection of the "
            "organization's information resources."
        ),
        implementation_evidence=(
            "1. Policy/procedure ensuring the secure physical access to critical systems.\n"
            "2. Number of physical security incidents during the specified period.\n"
            "3. Number of those incidents that allowed unauthorized entry."
        ),
        framework_category="Protect: Identity Management, Authentication, and Access Control",
        numerator_help=(
            "Number of physical security incidents that resulted in unauthorized "
            "access to facilities housing information systems"
        ),
        denominator_help="Total number of physical security incidents recorded during the assessment period",
    ),
    ParameterDefinition(
        id=13,
        measure_id="GV.RR.S5",
        title="Planning Measure",
        description=(
            "Percentage of employees who get authorized access to information "
            "systems only after they sign a confidentiality and integrity agreement."
        ),
        formula=(
            "(Number of users who are granted system access after signing "
            "confidentiality and integrity agreement / total number of users who are "
            "granted system access) x 100"
        ),
        target=TargetRule.HIGHER_IS_BETTER,
        weightage=1,
        control_info=(
            "Information Security Goal: Develop, document, periodically update, and "
            "implement security measures for authorised access to the information "
            "systems of the organisation."
        ),
        implementation_evidence=(
            "1. Number of users who accessed the system.\n"
            "2. Number of users who signed confidentiality and integrity agreements.\n"
            "3. Number of users granted access only after signing."
        ),
        framework_category="Governance: Roles and Responsibilities",
    ),
    ParameterDefinition(
        id=14,
        measure_id="PR.AA.S10",
        title="Personnel Security Screening Measure",
        description=(
            "Percentage (%) of individuals screened before being granted access to "
            "organizational information and information systems."
        ),
        formula=(
            "(Number of individuals screened / total number of individuals having "
            "access to organization's information and information systems) x 100"
        ),
        target=TargetRule.HIGHER_IS_BETTER,
        weightage=1,
        control_info=(
            "Information Security Goal: Ensure that individuals occupying positions of "
            "responsibility within organizations are trustworthy and meet established "
            "security criteria for those positions."
        ),
        implementation_evidence=(
            "1. Number of individuals granted access to organizational information.\n"
            "2. Number of individuals who completed personnel screening."
        ),
        framework_category="Protect: Identity Management, Authentication, and Access Control",
    ),
    ParameterDefinition(
        id=15,
        measure_id="ID.RA.S2",
        title="Risk Assessment Measure",
        description=(
            "Percentage of organization's information systems, and assets covered "
            "under risk assessment."
        ),
        formula=(
            "(Number of organization's information systems, and assets covered under "
            "risk assessment / Total number of organization information systems, and "
            "assets) x 100"
        ),
        target=TargetRule.HIGHER_IS_BETTER,
        weightage=5,
        control_info=(
            "Objective of this measure is to periodically assess the risk to "
            "organization's IT assets and operations."
        ),
        implementation_evidence=(
            "1. Completed cyber-risk assessment.\n"
            "2. Cyber Audit observation against Standard 2 mentioned in 'Identify: "
            "Risk Assessment' header in CSCRF Part-I."
        ),
        framework_category="Identify: Risk Assessment",
        numerator_help=(
            "Number of information systems and assets that have undergone a formal "
            "risk assessment process within the required timeframe"
        ),
        denominator_help="Total number of information systems and assets in the organization's inventory",
    ),
    ParameterDefinition(
        id=16,
        measure_id="GV.SC.S3",
        title="Service Acquisition Contract Measure",
        description=(
            "Percentage (%) of system and service acquisition contracts that include "
            "security requirements and/or specifications."
        ),
        formula=(
            "(Number of system and service acquisition contracts that include "
            "security requirements and specifications / total number of system and "
            "service acquisition contracts) x 100"
        ),
        target=TargetRule.HIGHER_IS_BETTER,
        weightage=3,
        control_info=(
            "Information Security Goal: Ensure third-party providers employ adequate "
            "security measures to protect information, applications, and/or "
            "services outsourced by the organization."
        ),
        implementation_evidence=(
            "1. Number of active service acquisition contracts.\n"
            "2. Number of contracts including security requirements and specifications.\n"
            "3. SLA for vulnerability closure and timely patch implementation."
        ),
        framework_category="Governance: Cybersecurity Supply Chain Risk Management",
    ),
    ParameterDefinition(
        id=17,
        measure_id="PR.DS.S4",
        title="System and Communication Protection Measure",
        description=(
            "Percentage of mobile computers and devices that perform all "
            "cryptographic operations."
        ),
        formula=(
            "(Number of mobile computers and devices that perform all cryptographic "
            "operations / total number of mobile computers and devices) x 100"
        ),
        target=TargetRule.HIGHER_IS_BETTER,
        weightage=1,
        control_info=(
            "Information Security Goal: Allocate sufficient resources to adequately "
            "protect electronic information infrastructure."
        ),
        implementation_evidence=(
            "1. Number of mobile computers and devices used in the organization.\n"
            "2. Number of devices employing cryptography.\n"
            "3. Number of devices with cryptography implementation waivers."
        ),
        framework_category="Protect: Data Security",
    ),
    ParameterDefinition(
        id=18,
        measure_id="GV.RM.S1, GV.RM.S2",
        title="Risk Management",
        description=(
            "Percentage (%) of organization information systems, and assets covered "
            "under risk management."
        ),
        formula=(
            "(Number of organization information systems, and assets covered under "
            "risk management / Total number of organization information systems, and "
            "assets) x 100"
        ),
        target=TargetRule.HIGHER_IS_BETTER,
        weightage=8,
        control_info=(
            "Based on risk appetite of the organization, cybersecurity risks are "
            "identified, analysed, evaluated, prioritized, responded, and monitored."
        ),
        implementation_evidence=(
            "1. Cyber-risk management framework.\n"
            "2. Established risk appetite and risk tolerance statements.\n"
            "3. Responses to risk observations based on the risk appetite."
        ),
        framework_category="Governance: Risk Management Strategy",
    ),
    ParameterDefinition(
        id=19,
        measure_id="ID.AM.S1, ID.AM.S2",
        title="Critical Assets Identified",
        description=(
            "Percentage (%) of the critical systems identified by REs among all "
            "other IT systems."
        ),
        formula="(Number of critical systems Identified / Total IT systems integrated with SOC) x 100",
        target=TargetRule.HALF_COVERAGE_FULL,
        weightage=9,
        control_info=(
            "Objective of this measure is to ensure identification and management of "
            "assets in accordance with their relative importance to the "
            "organizational objectives and the organization's risk strategy."
        ),
        implementation_evidence=(
            "1. Process to identify and approve the list of critical assets.\n"
            "2. List of critical assets identified as per the ID.AM.S1.\n"
            "3. Auditors reports on identification of assets as critical/non-critical."
        ),
        framework_category="Identify: Asset Management",
        numerator_help=(
            "Number of systems formally identified and classified as critical "
            "through the organization's asset classification process"
        ),
        denominator_help="Total number of IT systems integrated with Security Operations Center (SOC)",
    ),
    ParameterDefinition(
        id=20,
        measure_id="RS.MA.S5",
        title="CSK Events",
        description="Number of CSK reported events closed in timely manner.",
        formula=(
            "(Total number of CSK reported events closed in 15 days / Total number of "
            "CSK reported events to the organization) x 100"
        ),
        target=TargetRule.HIGHER_IS_BETTER,
        weightage=4,
        control_info="Objective of this measure is to mitigate threats upon external IPs.",
        implementation_evidence="1. Summary report of the events reported by CSK.",
        framework_category="Respond: Incident Management",
    ),
    ParameterDefinition(
        id=21,
        measure_id="GV.PO.S1",
        title="Cybersecurity Policy Document",
        description=(
            "Develop, document, periodically update, and implement cybersecurity "
            "policies and procedures for organizational information systems."
        ),
        formula="Non-quantifiable measure",
        target=TargetRule.HIGHER_IS_BETTER,
        weightage=4,
        control_info=(
            "Develop, document, periodically update, and implement cybersecurity "
            "policies and procedures for organizational information systems."
        ),
        implementation_evidence=(
            "1. Cybersecurity Policy document of the organization.\n"
            "2. Frequency of the revision of the policy document.\n"
            "3. Approval of the policy document."
        ),
        framework_category="Governance: Policy",
    ),
    ParameterDefinition(
        id=22,
        measure_id="SOC efficacy",
        title="SOC efficacy",
        description="How effective is our SOC operational?",
        formula="As specified in SOC efficacy (Annexure-N)",
        target=TargetRule.HIGHER_IS_BETTER,
        weightage=5,
        control_info="Measure the effectiveness of Security Operations Center.",
        implementation_evidence="1. How effective is the functioning of RE's SOC?",
        framework_category="Detect: Security Operations Centre",
    ),
    ParameterDefinition(
        id=23,
        measure_id="Automated compliance with CSCRF",
        title="Automated compliance with CSCRF",
        description=(
            "Develop an automated tool (preferably integrated with log aggregator) "
            "to submit compliance with CSCRF."
        ),
        formula=(
            "(Number of standards for which compliance has been automated for CSCRF "
            "compliance / Total number of CSCRF standards) x 100"
        ),
        target=TargetRule.HIGHER_IS_BETTER,
        weightage=5,
        control_info="Develop an automated tool to submit compliance with CSCRF.",
        implementation_evidence="1. Automated dashboard to get detailed reports of CSCRF standards compliance.",
        framework_category="Governance: Policy",
        numerator_help="Number of CSCRF standards for which compliance tracking has been automated using tools",
        denominator_help="Total number of standards in the CSCRF framework applicable to the organization",
    ),
]

# Lookup table for fast access by numeric id
PARAMETERS_BY_ID: dict[int, ParameterDefinition] = {p.id: p for p in CCI_PARAMETERS}

TOTAL_WEIGHTAGE: float = sum(p.weightage for p in CCI_PARAMETERS)

# Display order for domains and their sub-categories
DOMAIN_ORDER: list[str] = [
    "Governance",
    "Identify",
    "Protect",
    "Detect",
    "Respond",
    "Recover",
]

CATEGORY_ORDER: list[str] = [
    "Governance: Roles and Responsibilities",
    "Governance: Policy",
    "Governance: Risk Management Strategy",
    "Governance: Cybersecurity Supply Chain Risk Management",
    "Identify: Risk Assessment",
    "Identify: Asset Management",
    "Protect: Identity Management, Authentication, and Access Control",
    "Protect: Awareness and Training",
    "Protect: Data Security",
    "Protect: Maintenance",
    "Detect: Continuous Monitoring",
    "Detect: Security Operations Centre",
    "Respond: Incident Management",
    "Respond: Communications",
    "Recover: Recovery Planning",
]


def get_definition(parameter_id: int) -> ParameterDefinition | None:
    """Return the catalog definition for a parameter id, or None if unknown."""
    return PARAMETERS_BY_ID.get(parameter_id)
