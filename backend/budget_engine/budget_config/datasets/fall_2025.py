"""
Fall 2025 federal budget – spending/revenue trees and category map.

Amounts are in billions of dollars.  ``amount2024`` is the 2024-25 baseline,
``amount2025`` the 2025-26 projection.

Maintenance guide:
  - To add a program      → add a leaf to SPENDING_TREE and, if it should
                            follow a slider, a line to CATEGORY_MAP.
  - To recategorize       → move the name to a different category below.
  - To add a category     → first add it in budget_config/schema.py,
                            then reference the new id here.

Names not listed in CATEGORY_MAP fall into "Other Federal Programs", whose
reduction is pinned at 0.  Transfer, debt and other leaves never consult the
map.
"""

from __future__ import annotations

from typing import Any

from budget_engine.budget_config.datasets._base import BudgetDataset
from budget_engine.io.tree_reader import budget_node_from_mapping

# ═════════════════════════════════════════════════════════════════════════════
# CATEGORY MAP
# ═════════════════════════════════════════════════════════════════════════════
# Format: leaf name -> reduction category id

CATEGORY_MAP: dict[str, str] = {
    # ── Health ────────────────────────────────────────────────────────────
    "Health Care Systems + Protection":          "Health",
    "Food Safety":                               "Health",
    "Public Health + Disease Prevention":        "Health",
    "Health Research":                           "Health",

    # ── Public Safety ─────────────────────────────────────────────────────
    "RCMP":                                      "Public Safety",
    "Corrections":                               "Public Safety",
    "Justice System":                            "Public Safety",
    "Community Safety":                          "Public Safety",
    "CSIS":                                      "Public Safety",
    "Disaster Relief":                           "Public Safety",
    "Other Public Safety Expenses":              "Public Safety",

    # ── Social Services & Employment ──────────────────────────────────────
    "Employment + Training":                     "Social Services & Employment",
    "Housing Assistance":                        "Social Services & Employment",
    "Gender Equality":                           "Social Services & Employment",

    # ── Immigration & Border Services ─────────────────────────────────────
    "Other Immigration Services":                "Immigration & Border Services",
    "Border Security":                           "Immigration & Border Services",
    "Settlement Assistance":                     "Immigration & Border Services",
    "Citizenship + Passports":                   "Immigration & Border Services",
    "Visitors, International Students + Temporary Workers":
                                                 "Immigration & Border Services",
    "Interim Housing Assistance":                "Immigration & Border Services",

    # ── International Affairs ─────────────────────────────────────────────
    "Other International Affairs Activities":    "International Affairs",
    "Development, Peace + Security Programming": "International Affairs",
    "Support for Embassies + Canada's Presence Abroad":
                                                 "International Affairs",
    "International Diplomacy":                   "International Affairs",
    "Trade and Investment":                      "International Affairs",
    "International Development Research Centre": "International Affairs",

    # ── Economy + Innovation & Research ───────────────────────────────────
    "Investment, Growth and Commercialization":  "Economy + Innovation & Research",
    "Research":                                  "Economy + Innovation & Research",
    "Statistics Canada":                         "Economy + Innovation & Research",
    "Other Boards + Councils":                   "Economy + Innovation & Research",
    "Infrastructure Investments":                "Economy + Innovation & Research",
    "Innovative and Sustainable Natural Resources Development":
                                                 "Economy + Innovation & Research",
    "Nuclear Labs + Decommissioning":            "Economy + Innovation & Research",
    "Support for Global Competition":            "Economy + Innovation & Research",
    "Natural Resources Science + Risk Mitigation":
                                                 "Economy + Innovation & Research",
    "Other Natural Resources Management Support":
                                                 "Economy + Innovation & Research",
    "Transportation":                            "Economy + Innovation & Research",
    "Coastguard Operations":                     "Economy + Innovation & Research",
    "Fisheries + Aquatic Ecosystems":            "Economy + Innovation & Research",
    "Other Fisheries Expenses":                  "Economy + Innovation & Research",
    "Agriculture":                               "Economy + Innovation & Research",
    "Other Environment and Climate Change Programs":
                                                 "Economy + Innovation & Research",
    "Weather Services":                          "Economy + Innovation & Research",
    "Nature Conservation":                       "Economy + Innovation & Research",
    "National Parks":                            "Economy + Innovation & Research",
    "Space":                                     "Economy + Innovation & Research",
    "Banking + Finance":                         "Economy + Innovation & Research",

    # ── Government Operations ─────────────────────────────────────────────
    "Other Public Services + Procurement":       "Government Operations",
    "Government IT Operations":                  "Government Operations",
    "Parliament":                                "Government Operations",
    "Privy Council Office":                      "Government Operations",
    "Treasury Board":                            "Government Operations",
    "Office of the Secretary to the Governor General":
                                                 "Government Operations",
    "Office of the Chief Electoral Officer":     "Government Operations",

    # ── Culture & Official Languages ──────────────────────────────────────
    "Official Languages + Culture":              "Culture & Official Languages",

    # ── Revenue & Tax Administration ──────────────────────────────────────
    "Revenue Canada":                            "Revenue & Tax Administration",
}

# ═════════════════════════════════════════════════════════════════════════════
# SPENDING TREE
# ═════════════════════════════════════════════════════════════════════════════

SPENDING_TREE: dict[str, Any] = {
    "name": "Spending",
    "children": [
      {
        "name": "Economy and Standard of Living",
        "children": [
          {
            "name": "Standard of Living",
            "children": [
              {
                "name": "Health",
                "children": [
                  {
                    "name": "Health Research",
                    "amount2024": 1.35,
                    "amount2025": 1.35,
                  },
                  {
                    "name": "Health Care Systems + Protection",
                    "amount2024": 6.85,
                    "amount2025": 6.85,
                  },
                  {
                    "name": "Food Safety",
                    "amount2024": 1.08,
                    "amount2025": 1.08,
                  },
                  {
                    "name": "Public Health + Disease Prevention",
                    "amount2024": 4.43,
                    "amount2025": 4.43,
                  },
                ],
              },
              {
                "name": "Standard of Living",
                "children": [
                  {
                    "name": "Revenue Canada",
                    "amount2024": 6.94,
                    "amount2025": 6.94,
                  },
                  {
                    "name": "Employment + Training",
                    "amount2024": 28.26,
                    "amount2025": 28.26,
                  },
                  {
                    "name": "Housing Assistance",
                    "amount2024": 5.43,
                    "amount2025": 5.43,
                  },
                  {
                    "name": "Gender Equality",
                    "amount2024": 0.32,
                    "amount2025": 0.32,
                  },
                  {
                    "name": "Official Languages + Culture",
                    "amount2024": 4.78,
                    "amount2025": 4.78,
                  },
                  {
                    "name": "Support for Veterans",
                    "amount2024": 6.07,
                    "amount2025": 6.07,
                    "kind": "program",
                  },
                  {
                    "name": "Carbon Tax Rebate",
                    "amount2024": 9.86,
                    "amount2025": 0,
                    "kind": "other",
                  },
                ],
              },
            ],
          },
          {
            "name": "Economy + Infrastructure",
            "children": [
              {
                "name": "Innovation + Research",
                "children": [
                  {
                    "name": "Investment, Growth and Commercialization",
                    "amount2024": 4.35,
                    "amount2025": 4.35,
                  },
                  {
                    "name": "Research",
                    "amount2024": 4.11,
                    "amount2025": 4.11,
                  },
                  {
                    "name": "Statistics Canada",
                    "amount2024": 0.74,
                    "amount2025": 0.74,
                  },
                  {
                    "name": "Other Boards + Councils",
                    "amount2024": 0.18,
                    "amount2025": 0.18,
                  },
                ],
              },
              {
                "name": "Community and Regional Development",
                "children": [
                  {
                    "name": "Economic Development in Southern Ontario",
                    "amount2024": 0.46,
                    "amount2025": 0.46,
                  },
                  {
                    "name": "Economic Development in Atlantic Canada",
                    "amount2024": 0.39,
                    "amount2025": 0.39,
                  },
                  {
                    "name": "Economic Development in the Pacific Region",
                    "amount2024": 0.19,
                    "amount2025": 0.19,
                  },
                  {
                    "name": "Western + Northern Economic Development",
                    "amount2024": 1.09,
                    "amount2025": 1.09,
                  },
                  {
                    "name": "Economic Development in Northern Ontario",
                    "amount2024": 0.07,
                    "amount2025": 0.07,
                  },
                  {
                    "name": "Economic Development in Quebec",
                    "amount2024": 0.39,
                    "amount2025": 0.39,
                  },
                ],
              },
              {
                "name": "Fisheries",
                "children": [
                  {
                    "name": "Coastguard Operations",
                    "amount2024": 1.8,
                    "amount2025": 1.8,
                  },
                  {
                    "name": "Fisheries + Aquatic Ecosystems",
                    "amount2024": 1.78,
                    "amount2025": 1.78,
                  },
                  {
                    "name": "Other Fisheries Expenses",
                    "amount2024": 0.97,
                    "amount2025": 0.97,
                  },
                ],
              },
              {
                "name": "Agriculture",
                "amount2024": 4.19,
                "amount2025": 4.19,
              },
              {
                "name": "Space",
                "amount2024": 0.45,
                "amount2025": 0.45,
              },
              {
                "name": "Banking + Finance",
                "amount2024": 0.23,
                "amount2025": 0.23,
              },
              {
                "name": "Environment and Climate Change",
                "children": [
                  {
                    "name": "Other Environment and Climate Change Programs",
                    "amount2024": 1.46,
                    "amount2025": 1.46,
                  },
                  {
                    "name": "Weather Services",
                    "amount2024": 0.28,
                    "amount2025": 0.28,
                  },
                  {
                    "name": "Nature Conservation",
                    "amount2024": 0.72,
                    "amount2025": 0.72,
                  },
                  {
                    "name": "National Parks",
                    "amount2024": 1.45,
                    "amount2025": 1.45,
                  },
                ],
              },
              {
                "name": "Natural Resources Management",
                "children": [
                  {
                    "name": "Innovative and Sustainable Natural Resources Development",
                    "amount2024": 1.911,
                    "amount2025": 1.911,
                  },
                  {
                    "name": "Support for Global Competition",
                    "amount2024": 0.874,
                    "amount2025": 0.874,
                  },
                  {
                    "name": "Nuclear Labs + Decommissioning",
                    "amount2024": 1.514,
                    "amount2025": 1.514,
                  },
                  {
                    "name": "Natural Resources Science + Risk Mitigation",
                    "amount2024": 0.452,
                    "amount2025": 0.452,
                  },
                  {
                    "name": "Other Natural Resources Management Support",
                    "amount2024": 0.344,
                    "amount2025": 0.344,
                  },
                ],
              },
              {
                "name": "Infrastructure Investments",
                "amount2024": 9.02,
                "amount2025": 9.02,
                "capitalShare": 1.0,
                "kind": "program",
              },
              {
                "name": "Transportation",
                "amount2024": 5.31,
                "amount2025": 5.31,
              },
            ],
          },
        ],
      },
      {
        "name": "Social Security",
        "children": [
          {
            "name": "Retirement Benefits",
            "amount2024": 76.03,
            "amount2025": 76.03,
            "kind": "transfer",
          },
          {
            "name": "Employment Insurance",
            "amount2024": 23.13,
            "amount2025": 23.13,
            "kind": "transfer",
          },
          {
            "name": "Children's Benefits",
            "amount2024": 26.34,
            "amount2025": 26.55,
            "kind": "transfer",
          },
          {
            "name": "COVID-19 Income Support",
            "amount2024": -4.84,
            "amount2025": 0,
            "kind": "transfer",
          },
          {
            "name": "Canada Emergency Wage Subsidy",
            "amount2024": -0.42,
            "amount2025": 0,
            "kind": "transfer",
          },
        ],
      },
      {
        "name": "New Spending",
        "children": [
          {
            "name": "Strategic Response Fund",
            "amount2024": 0,
            "amount2025": 5,
            "capitalShare": 1.0,
            "kind": "program",
          },
          {
            "name": "Regional Tariff Response Initiative",
            "amount2024": 0,
            "amount2025": 1,
            "capitalShare": 1.0,
            "kind": "program",
          },
          {
            "name": "Biofuel Production Incentive",
            "amount2024": 0,
            "amount2025": 0.37,
            "capitalShare": 1.0,
            "kind": "program",
          },
          {
            "name": "Build Canada Homes",
            "amount2024": 0,
            "amount2025": 13,
            "capitalShare": 1.0,
            "kind": "program",
          },
        ],
      },
      {
        "name": "Safety",
        "children": [
          {
            "name": "Public Safety",
            "children": [
              {
                "name": "CSIS",
                "amount2024": 0.83,
                "amount2025": 0.83,
              },
              {
                "name": "Corrections",
                "amount2024": 3.374,
                "amount2025": 3.374,
              },
              {
                "name": "RCMP",
                "amount2024": 5.14,
                "amount2025": 5.14,
              },
              {
                "name": "Disaster Relief",
                "amount2024": 0.52,
                "amount2025": 0.52,
              },
              {
                "name": "Community Safety",
                "amount2024": 0.839,
                "amount2025": 0.839,
              },
              {
                "name": "Office of the Chief Electoral Officer",
                "amount2024": 0.249,
                "amount2025": 0.249,
              },
              {
                "name": "Other Public Safety Expenses",
                "amount2024": 0.269,
                "amount2025": 0.269,
              },
              {
                "name": "Justice System",
                "amount2024": 2.442,
                "amount2025": 2.442,
              },
            ],
          },
          {
            "name": "Immigration + Border Security",
            "children": [
              {
                "name": "Border Security",
                "amount2024": 2.69,
                "amount2025": 2.82,
              },
              {
                "name": "Other Immigration Services",
                "amount2024": 3.389,
                "amount2025": 3.389,
              },
              {
                "name": "Settlement Assistance",
                "amount2024": 1.926,
                "amount2025": 1.926,
              },
              {
                "name": "Interim Housing Assistance",
                "amount2024": 0.26,
                "amount2025": 0.26,
              },
              {
                "name": "Visitors, International Students + Temporary Workers",
                "amount2024": 0.52,
                "amount2025": 0.52,
              },
              {
                "name": "Citizenship + Passports",
                "amount2024": 0.24,
                "amount2025": 0.24,
              },
            ],
          },
        ],
      },
      {
        "name": "Other",
        "children": [
          {
            "name": "Public Works + Government Services",
            "children": [
              {
                "name": "Other Public Services + Procurement",
                "amount2024": 5.388,
                "amount2025": 5.388,
              },
              {
                "name": "Government IT Operations",
                "amount2024": 2.7,
                "amount2025": 2.7,
              },
            ],
          },
          {
            "name": "Functioning of Government",
            "children": [
              {
                "name": "Parliament",
                "amount2024": 0.93,
                "amount2025": 0.93,
              },
              {
                "name": "Privy Council Office",
                "amount2024": 0.347,
                "amount2025": 0.347,
              },
              {
                "name": "Treasury Board",
                "amount2024": 4.954,
                "amount2025": 4.954,
              },
              {
                "name": "Office of the Secretary to the Governor General",
                "amount2024": 0.026,
                "amount2025": 0.026,
              },
            ],
          },
          {
            "name": "Net actuarial losses",
            "amount2024": -7.49,
            "amount2025": -7.49,
            "kind": "other",
          },
        ],
      },
      {
        "name": "Transfers to Provinces",
        "link": "https://www.canada.ca/en/department-finance/programs/federal-transfers/major-federal-transfers.html",
        "children": [
          {
            "name": "Health Transfer to Provinces",
            "children": [
              {
                "name": "Newfoundland and Labrador HTP",
                "amount2024": 0.666,
                "amount2025": 0.666,
                "kind": "transfer",
              },
              {
                "name": "Prince Edward Island HTP",
                "amount2024": 0.214,
                "amount2025": 0.214,
                "kind": "transfer",
              },
              {
                "name": "Nova Scotia HTP",
                "amount2024": 1.303,
                "amount2025": 1.303,
                "kind": "transfer",
              },
              {
                "name": "New Brunswick HTP",
                "amount2024": 1.027,
                "amount2025": 1.027,
                "kind": "transfer",
              },
              {
                "name": "Quebec HTP",
                "amount2024": 10.911,
                "amount2025": 10.911,
                "kind": "transfer",
              },
              {
                "name": "Ontario HTP",
                "amount2024": 19.266,
                "amount2025": 19.266,
                "kind": "transfer",
              },
              {
                "name": "Manitoba HTP",
                "amount2024": 1.794,
                "amount2025": 1.794,
                "kind": "transfer",
              },
              {
                "name": "Saskatchewan HTP",
                "amount2024": 1.491,
                "amount2025": 1.491,
                "kind": "transfer",
              },
              {
                "name": "Alberta HTP",
                "amount2024": 5.771,
                "amount2025": 5.771,
                "kind": "transfer",
              },
              {
                "name": "British Columbia HTP",
                "amount2024": 6.817,
                "amount2025": 6.817,
                "kind": "transfer",
              },
              {
                "name": "Yukon HTP",
                "amount2024": 0.056,
                "amount2025": 0.056,
                "kind": "transfer",
              },
              {
                "name": "Northwest Territories HTP",
                "amount2024": 0.055,
                "amount2025": 0.055,
                "kind": "transfer",
              },
              {
                "name": "Nunavut HTP",
                "amount2024": 0.05,
                "amount2025": 0.05,
                "kind": "transfer",
              },
            ],
          },
          {
            "name": "Social Transfer to Provinces",
            "children": [
              {
                "name": "Newfoundland and Labrador STP",
                "amount2024": 0.221,
                "amount2025": 0.221,
                "kind": "transfer",
              },
              {
                "name": "Prince Edward Island STP",
                "amount2024": 0.071,
                "amount2025": 0.071,
                "kind": "transfer",
              },
              {
                "name": "Nova Scotia STP",
                "amount2024": 0.433,
                "amount2025": 0.433,
                "kind": "transfer",
              },
              {
                "name": "New Brunswick STP",
                "amount2024": 0.341,
                "amount2025": 0.341,
                "kind": "transfer",
              },
              {
                "name": "Quebec STP",
                "amount2024": 3.624,
                "amount2025": 3.624,
                "kind": "transfer",
              },
              {
                "name": "Ontario STP",
                "amount2024": 6.4,
                "amount2025": 6.4,
                "kind": "transfer",
              },
              {
                "name": "Manitoba STP",
                "amount2024": 0.596,
                "amount2025": 0.596,
                "kind": "transfer",
              },
              {
                "name": "Saskatchewan STP",
                "amount2024": 0.495,
                "amount2025": 0.495,
                "kind": "transfer",
              },
              {
                "name": "Alberta STP",
                "amount2024": 1.917,
                "amount2025": 1.917,
                "kind": "transfer",
              },
              {
                "name": "British Columbia STP",
                "amount2024": 2.264,
                "amount2025": 2.264,
                "kind": "transfer",
              },
              {
                "name": "Yukon STP",
                "amount2024": 0.019,
                "amount2025": 0.019,
                "kind": "transfer",
              },
              {
                "name": "Northwest Territories STP",
                "amount2024": 0.018,
                "amount2025": 0.018,
                "kind": "transfer",
              },
              {
                "name": "Nunavut STP",
                "amount2024": 0.017,
                "amount2025": 0.017,
                "kind": "transfer",
              },
            ],
          },
          {
            "name": "Equalization Payments to Provinces",
            "children": [
              {
                "name": "Newfoundland and Labrador EQP",
                "amount2024": 0,
                "amount2025": 0,
              },
              {
                "name": "Prince Edward Island EQP",
                "amount2024": 0.561,
                "amount2025": 0.561,
                "kind": "transfer",
              },
              {
                "name": "Nova Scotia EQP",
                "amount2024": 2.803,
                "amount2025": 2.803,
                "kind": "transfer",
              },
              {
                "name": "New Brunswick EQP",
                "amount2024": 2.631,
                "amount2025": 2.631,
                "kind": "transfer",
              },
              {
                "name": "Quebec EQP",
                "amount2024": 14.037,
                "amount2025": 14.037,
                "kind": "transfer",
              },
              {
                "name": "Ontario EQP",
                "amount2024": 0.421,
                "amount2025": 0.421,
                "kind": "transfer",
              },
              {
                "name": "Manitoba EQP",
                "amount2024": 3.51,
                "amount2025": 3.51,
                "kind": "transfer",
              },
              {
                "name": "Saskatchewan EQP",
                "amount2024": 0,
                "amount2025": 0,
              },
              {
                "name": "Alberta EQP",
                "amount2024": 0,
                "amount2025": 0,
              },
              {
                "name": "British Columbia EQP",
                "amount2024": 0,
                "amount2025": 0,
              },
              {
                "name": "Yukon EQP",
                "amount2024": 0,
                "amount2025": 0,
              },
              {
                "name": "Northwest Territories EQP",
                "amount2024": 0,
                "amount2025": 0,
              },
              {
                "name": "Nunavut EQP",
                "amount2024": 0,
                "amount2025": 0,
              },
            ],
          },
          {
            "name": "Quebec Tax Offset",
            "amount2024": -7.1,
            "amount2025": -7.1,
            "kind": "transfer",
          },
          {
            "name": "Other Major Transfers",
            "amount2024": 17.6,
            "amount2025": 17.6,
            "kind": "transfer",
          },
        ],
      },
      {
        "name": "Obligations",
        "children": [
          {
            "name": "Net Interest on Debt",
            "amount2024": 47.27,
            "amount2025": 47.27,
            "kind": "debt",
          },
        ],
      },
      {
        "name": "Defence",
        "children": [
          {
            "name": "Ready Forces",
            "amount2024": 13.368,
            "amount2025": 16.368,
            "kind": "program",
          },
          {
            "name": "Defence Procurement",
            "amount2024": 4.93,
            "amount2025": 7.93,
            "capitalShare": 1.0,
            "kind": "program",
          },
          {
            "name": "Sustainable Bases, IT Systems, Infrastructure",
            "amount2024": 4.913,
            "amount2025": 4.913,
            "capitalShare": 1.0,
            "kind": "program",
          },
          {
            "name": "Defence Team",
            "amount2024": 5.39,
            "amount2025": 8.09,
            "kind": "program",
          },
          {
            "name": "Future Force Design",
            "amount2024": 1.472,
            "amount2025": 1.472,
            "kind": "program",
          },
          {
            "name": "Defence Operations + Internal Services",
            "amount2024": 3.39,
            "amount2025": 3.39,
            "kind": "program",
          },
          {
            "name": "Communications Security Establishment",
            "amount2024": 1.01,
            "amount2025": 1.01,
            "kind": "program",
          },
          {
            "name": "Other Defence",
            "amount2024": 0.01,
            "amount2025": 0.01,
            "kind": "program",
          },
        ],
      },
      {
        "name": "Indigenous Priorities",
        "children": [
          {
            "name": "Indigenous Well-Being + Self Determination",
            "children": [
              {
                "name": "Grants to Support the New Fiscal Relationship with First Nations",
                "amount2024": 1.36,
                "amount2025": 1.36,
                "kind": "transfer",
              },
              {
                "name": "Community Infrastructure Grants",
                "amount2024": 3.31,
                "amount2025": 3.31,
                "kind": "transfer",
              },
              {
                "name": "First Nations Elementary and Secondary Educational Advancement",
                "amount2024": 2.56,
                "amount2025": 2.56,
                "kind": "transfer",
              },
              {
                "name": "On-reserve Income Support in Yukon Territory",
                "amount2024": 1.4,
                "amount2025": 1.4,
                "kind": "transfer",
              },
              {
                "name": "First Nations and Inuit Health Infrastructure Support",
                "amount2024": 1.22,
                "amount2025": 1.22,
                "kind": "transfer",
              },
              {
                "name": "Emergency Management Activities On-Reserve",
                "amount2024": 0.59,
                "amount2025": 0.59,
                "kind": "transfer",
              },
              {
                "name": "Prevention and Protection Services for Children, Youth, Families and Communities",
                "amount2024": 3.57,
                "amount2025": 3.57,
                "kind": "transfer",
              },
              {
                "name": "First Nations and Inuit Primary Health Care",
                "amount2024": 3.03,
                "amount2025": 3.03,
                "kind": "transfer",
              },
              {
                "name": "Other Support for Indigenous Well-Being",
                "amount2024": 9.45,
                "amount2025": 9.45,
                "kind": "transfer",
              },
            ],
          },
          {
            "name": "Crown-Indigenous Relations",
            "children": [
              {
                "name": "Claims Settlements",
                "children": [
                  {
                    "name": "Out of Court Settlement",
                    "amount2024": 5.0,
                    "amount2025": 0,
                    "kind": "other",
                  },
                  {
                    "name": "Gottfriedson Band Class Settlement",
                    "amount2024": 2.82,
                    "amount2025": 0,
                    "kind": "other",
                  },
                  {
                    "name": "Childhood Claims Settlement",
                    "amount2024": 1.42,
                    "amount2025": 0,
                    "kind": "other",
                  },
                  {
                    "name": "Other Settlement Agreements",
                    "amount2024": 0.85,
                    "amount2025": 0,
                    "kind": "other",
                  },
                ],
              },
              {
                "name": "Other Grants and Contributions to Support Crown-Indigenous Relations",
                "amount2024": 6.26,
                "amount2025": 6.26,
                "kind": "other",
              },
            ],
          },
        ],
      },
      {
        "name": "International Affairs",
        "children": [
          {
            "name": "Development, Peace + Security Programming",
            "amount2024": 5.37,
            "amount2025": 5.37,
          },
          {
            "name": "International Diplomacy",
            "amount2024": 1.0,
            "amount2025": 1.0,
          },
          {
            "name": "International Development Research Centre",
            "amount2024": 0.16,
            "amount2025": 0.16,
          },
          {
            "name": "Support for Embassies + Canada's Presence Abroad",
            "amount2024": 1.23,
            "amount2025": 1.23,
          },
          {
            "name": "Other International Affairs Activities",
            "amount2024": 11.03,
            "amount2025": 11.03,
          },
          {
            "name": "Trade and Investment",
            "amount2024": 0.41,
            "amount2025": 0.41,
          },
        ],
      },
    ],
}

# ═════════════════════════════════════════════════════════════════════════════
# REVENUE TREE
# ═════════════════════════════════════════════════════════════════════════════

REVENUE_TREE: dict[str, Any] = {
    "name": "Revenue",
    "children": [
      {
        "name": "Other Taxes and Duties",
        "children": [
          {
            "name": "Goods and Services Tax",
            "amount2024": 51.42,
            "amount2025": 51.42,
          },
          {
            "name": "Energy Taxes",
            "children": [
              {
                "name": "Excise Tax — Gasoline",
                "amount2024": 4.33,
                "amount2025": 4.33,
              },
              {
                "name": "Excise Tax - Diesel Fuel",
                "amount2024": 1.12,
                "amount2025": 1.12,
              },
              {
                "name": "Excise Tax — Aviation Gasoline and Jet Fuel",
                "amount2024": 0.14,
                "amount2025": 0.14,
              },
            ],
          },
          {
            "name": "Customs Duties",
            "amount2024": 5.57,
            "amount2025": 5.57,
          },
          {
            "name": "Other Excise Taxes and Duties",
            "children": [
              {
                "name": "Excise Duties",
                "amount2024": 5.33,
                "amount2025": 5.33,
              },
              {
                "name": "Air Travellers Charge",
                "amount2024": 1.5,
                "amount2025": 1.5,
              },
            ],
          },
        ],
      },
      {
        "name": "Individual Income Taxes",
        "amount2024": 217.7,
        "amount2025": 212.3,
      },
      {
        "name": "Corporate Income Taxes",
        "amount2024": 82.47,
        "amount2025": 82.47,
      },
      {
        "name": "Non-resident Income Taxes",
        "amount2024": 12.54,
        "amount2025": 12.54,
      },
      {
        "name": "Payroll Taxes",
        "children": [
          {
            "name": "Employment Insurance Premiums",
            "amount2024": 29.56,
            "amount2025": 29.56,
          },
        ],
      },
      {
        "name": "Carbon Tax Revenue",
        "amount2024": 9.86,
        "amount2025": 0,
      },
      {
        "name": "Other Non-tax Revenue",
        "children": [
          {
            "name": "Crown Corporations and other government business enterprises",
            "amount2024": 3.22,
            "amount2025": 3.22,
          },
          {
            "name": "Net Foreign Exchange Revenue",
            "amount2024": 3.4,
            "amount2025": 3.4,
          },
          {
            "name": "Return on Investments",
            "amount2024": 0.88,
            "amount2025": 0.88,
          },
          {
            "name": "Sales of Government Goods + Services",
            "amount2024": 13.99,
            "amount2025": 13.99,
          },
          {
            "name": "Miscellaneous revenues",
            "amount2024": 15.87,
            "amount2025": 15.87,
          },
        ],
      },
    ],
}


DATASET = BudgetDataset(
    dataset_id="fall-2025",
    label="Fall 2025 Federal Budget",
    spending=budget_node_from_mapping(SPENDING_TREE),
    revenue=budget_node_from_mapping(REVENUE_TREE),
    category_map=CATEGORY_MAP,
)
