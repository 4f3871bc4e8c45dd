"""Medicinal product definition and substance resources."""

from __future__ import annotations

from fhir_codec.shapes import backbone, choice, element

from fhir_codec.catalog._base import resource

_AMOUNT = ["Quantity", "string"]


def _other_therapy():
    return backbone(
        "otherTherapy", "0..*",
        element("therapyRelationshipType", "CodeableConcept", "1..1"),
        choice("medication", ["CodeableConcept", "Reference"], "1..1"),
    )


def _sources():
    return element("source", "Reference", "0..*")


RESOURCES = [
    resource(
        "MedicinalProduct",
        element("identifier", "Identifier", "0..*"),
        element("type", "CodeableConcept"),
        element("domain", "Coding"),
        element("combinedPharmaceuticalDoseForm", "CodeableConcept"),
        element("legalStatusOfSupply", "CodeableConcept"),
        element("additionalMonitoringIndicator", "CodeableConcept"),
        element("specialMeasures", "string", "0..*"),
        element("paediatricUseIndicator", "CodeableConcept"),
        element("productClassification", "CodeableConcept", "0..*"),
        element("marketingStatus", "MarketingStatus", "0..*"),
        element("pharmaceuticalProduct", "Reference", "0..*"),
        element("packagedMedicinalProduct", "Reference", "0..*"),
        element("attachedDocument", "Reference", "0..*"),
        element("masterFile", "Reference", "0..*"),
        element("contact", "Reference", "0..*"),
        element("clinicalTrial", "Reference", "0..*"),
        backbone(
            "name", "1..*",
            element("productName", "string", "1..1"),
            backbone(
                "namePart", "0..*",
                element("part", "string", "1..1"),
                element("type", "Coding", "1..1"),
            ),
            backbone(
                "countryLanguage", "0..*",
                element("country", "CodeableConcept", "1..1"),
                element("jurisdiction", "CodeableConcept"),
                element("language", "CodeableConcept", "1..1"),
            ),
        ),
        element("crossReference", "Identifier", "0..*"),
        backbone(
            "manufacturingBusinessOperation", "0..*",
            element("operationType", "CodeableConcept"),
            element("authorisationReferenceNumber", "Identifier"),
            element("effectiveDate", "dateTime"),
            element("confidentialityIndicator", "CodeableConcept"),
            element("manufacturer", "Reference", "0..*"),
            element("regulator", "Reference"),
        ),
        backbone(
            "specialDesignation", "0..*",
            element("identifier", "Identifier", "0..*"),
            element("type", "CodeableConcept"),
            element("intendedUse", "CodeableConcept"),
            choice("indication", ["CodeableConcept", "Reference"]),
            element("status", "CodeableConcept"),
            element("date", "dateTime"),
            element("species", "CodeableConcept"),
        ),
    ),
    resource(
        "MedicinalProductAuthorization",
        element("identifier", "Identifier", "0..*"),
        element("subject", "Reference"),
        element("country", "CodeableConcept", "0..*"),
        element("jurisdiction", "CodeableConcept", "0..*"),
        element("status", "CodeableConcept"),
        element("statusDate", "dateTime"),
        element("restoreDate", "dateTime"),
        element("validityPeriod", "Period"),
        element("dataExclusivityPeriod", "Period"),
        element("dateOfFirstAuthorization", "dateTime"),
        element("internationalBirthDate", "dateTime"),
        element("legalBasis", "CodeableConcept"),
        backbone(
            "jurisdictionalAuthorization", "0..*",
            element("identifier", "Identifier", "0..*"),
            element("country", "CodeableConcept"),
            element("jurisdiction", "CodeableConcept", "0..*"),
            element("legalStatusOfSupply", "CodeableConcept"),
            element("validityPeriod", "Period"),
        ),
        element("holder", "Reference"),
        element("regulator", "Reference"),
        backbone(
            "procedure", "0..1",
            element("identifier", "Identifier"),
            element("type", "CodeableConcept", "1..1"),
            choice("date", ["Period", "dateTime"]),
            element("application", "#MedicinalProductAuthorization.procedure", "0..*"),
        ),
    ),
    resource(
        "MedicinalProductContraindication",
        element("subject", "Reference", "0..*"),
        element("disease", "CodeableConcept"),
        element("diseaseStatus", "CodeableConcept"),
        element("comorbidity", "CodeableConcept", "0..*"),
        element("therapeuticIndication", "Reference", "0..*"),
        _other_therapy(),
        element("population", "Population", "0..*"),
    ),
    resource(
        "MedicinalProductIndication",
        element("subject", "Reference", "0..*"),
        element("diseaseSymptomProcedure", "CodeableConcept"),
        element("diseaseStatus", "CodeableConcept"),
        element("comorbidity", "CodeableConcept", "0..*"),
        element("intendedEffect", "CodeableConcept"),
        element("duration", "Quantity"),
        _other_therapy(),
        element("undesirableEffect", "Reference", "0..*"),
        element("population", "Population", "0..*"),
    ),
    resource(
        "MedicinalProductIngredient",
        element("identifier", "Identifier"),
        element("role", "CodeableConcept", "1..1"),
        element("allergenicIndicator", "boolean"),
        element("manufacturer", "Reference", "0..*"),
        backbone(
            "specifiedSubstance", "0..*",
            element("code", "CodeableConcept", "1..1"),
            element("group", "CodeableConcept", "1..1"),
            element("confidentiality", "CodeableConcept"),
            backbone(
                "strength", "0..*",
                element("presentation", "Ratio", "1..1"),
                element("presentationLowLimit", "Ratio"),
                element("concentration", "Ratio"),
                element("concentrationLowLimit", "Ratio"),
                element("measurementPoint", "string"),
                element("country", "CodeableConcept", "0..*"),
                backbone(
                    "referenceStrength", "0..*",
                    element("substance", "CodeableConcept"),
                    element("strength", "Ratio", "1..1"),
                    element("strengthLowLimit", "Ratio"),
                    element("measurementPoint", "string"),
                    element("country", "CodeableConcept", "0..*"),
                ),
            ),
        ),
        backbone(
            "substance", "0..1",
            element("code", "CodeableConcept", "1..1"),
            element(
                "strength",
                "#MedicinalProductIngredient.specifiedSubstance.strength",
                "0..*",
            ),
        ),
    ),
    resource(
        "MedicinalProductInteraction",
        element("subject", "Reference", "0..*"),
        element("description", "string"),
        backbone(
            "interactant", "0..*",
            choice("item", ["Reference", "CodeableConcept"], "1..1"),
        ),
        element("type", "CodeableConcept"),
        element("effect", "CodeableConcept"),
        element("incidence", "CodeableConcept"),
        element("management", "CodeableConcept"),
    ),
    resource(
        "MedicinalProductManufactured",
        element("manufacturedDoseForm", "CodeableConcept", "1..1"),
        element("unitOfPresentation", "CodeableConcept"),
        element("quantity", "Quantity", "1..1"),
        element("manufacturer", "Reference", "0..*"),
        element("ingredient", "Reference", "0..*"),
        element("physicalCharacteristics", "ProdCharacteristic"),
        element("otherCharacteristics", "CodeableConcept", "0..*"),
    ),
    resource(
        "MedicinalProductPackaged",
        element("identifier", "Identifier", "0..*"),
        element("subject", "Reference", "0..*"),
        element("description", "string"),
        element("legalStatusOfSupply", "CodeableConcept"),
        element("marketingStatus", "MarketingStatus", "0..*"),
        element("marketingAuthorization", "Reference"),
        element("manufacturer", "Reference", "0..*"),
        backbone(
            "batchIdentifier", "0..*",
            element("outerPackaging", "Identifier", "1..1"),
            element("immediatePackaging", "Identifier"),
        ),
        backbone(
            "packageItem", "1..*",
            element("identifier", "Identifier", "0..*"),
            element("type", "CodeableConcept", "1..1"),
            element("quantity", "Quantity", "1..1"),
            element("material", "CodeableConcept", "0..*"),
            element("alternateMaterial", "CodeableConcept", "0..*"),
            element("device", "Reference", "0..*"),
            element("manufacturedItem", "Reference", "0..*"),
            element("packageItem", "#MedicinalProductPackaged.packageItem", "0..*"),
            element("physicalCharacteristics", "ProdCharacteristic"),
            element("otherCharacteristics", "CodeableConcept", "0..*"),
            element("shelfLifeStorage", "ProductShelfLife", "0..*"),
            element("manufacturer", "Reference", "0..*"),
        ),
    ),
    resource(
        "MedicinalProductPharmaceutical",
        element("identifier", "Identifier", "0..*"),
        element("administrableDoseForm", "CodeableConcept", "1..1"),
        element("unitOfPresentation", "CodeableConcept"),
        element("ingredient", "Reference", "0..*"),
        element("device", "Reference", "0..*"),
        backbone(
            "characteristics", "0..*",
            element("code", "CodeableConcept", "1..1"),
            element("status", "CodeableConcept"),
        ),
        backbone(
            "routeOfAdministration", "1..*",
            element("code", "CodeableConcept", "1..1"),
            element("firstDose", "Quantity"),
            element("maxSingleDose", "Quantity"),
            element("maxDosePerDay", "Quantity"),
            element("maxDosePerTreatmentPeriod", "Ratio"),
            element("maxTreatmentPeriod", "Duration"),
            backbone(
                "targetSpecies", "0..*",
                element("code", "CodeableConcept", "1..1"),
                backbone(
                    "withdrawalPeriod", "0..*",
                    element("tissue", "CodeableConcept", "1..1"),
                    element("value", "Quantity", "1..1"),
                    element("supportingInformation", "string"),
                ),
            ),
        ),
    ),
    resource(
        "MedicinalProductUndesirableEffect",
        element("subject", "Reference", "0..*"),
        element("symptomConditionEffect", "CodeableConcept"),
        element("classification", "CodeableConcept"),
        element("frequencyOfOccurrence", "CodeableConcept"),
        element("population", "Population", "0..*"),
    ),
    resource(
        "SubstanceNucleicAcid",
        element("sequenceType", "CodeableConcept"),
        element("numberOfSubunits", "integer"),
        element("areaOfHybridisation", "string"),
        element("oligoNucleotideType", "CodeableConcept"),
        backbone(
            "subunit", "0..*",
            element("subunit", "integer"),
            element("sequence", "string"),
            element("length", "integer"),
            element("sequenceAttachment", "Attachment"),
            element("fivePrime", "CodeableConcept"),
            element("threePrime", "CodeableConcept"),
            backbone(
                "linkage", "0..*",
                element("connectivity", "string"),
                element("identifier", "Identifier"),
                element("name", "string"),
                element("residueSite", "string"),
            ),
            backbone(
                "sugar", "0..*",
                element("identifier", "Identifier"),
                element("name", "string"),
                element("residueSite", "string"),
            ),
        ),
    ),
    resource(
        "SubstancePolymer",
        element("class", "CodeableConcept"),
        element("geometry", "CodeableConcept"),
        element("copolymerConnectivity", "CodeableConcept", "0..*"),
        element("modification", "string", "0..*"),
        backbone(
            "monomerSet", "0..*",
            element("ratioType", "CodeableConcept"),
            backbone(
                "startingMaterial", "0..*",
                element("material", "CodeableConcept"),
                element("type", "CodeableConcept"),
                element("isDefining", "boolean"),
                element("amount", "SubstanceAmount"),
            ),
        ),
        backbone(
            "repeat", "0..*",
            element("numberOfUnits", "integer"),
            element("averageMolecularFormula", "string"),
            element("repeatUnitAmountType", "CodeableConcept"),
            backbone(
                "repeatUnit", "0..*",
                element("orientationOfPolymerisation", "CodeableConcept"),
                element("repeatUnit", "string"),
                element("amount", "SubstanceAmount"),
                backbone(
                    "degreeOfPolymerisation", "0..*",
                    element("degree", "CodeableConcept"),
                    element("amount", "SubstanceAmount"),
                ),
                backbone(
                    "structuralRepresentation", "0..*",
                    element("type", "CodeableConcept"),
                    element("representation", "string"),
                    element("attachment", "Attachment"),
                ),
            ),
        ),
    ),
    resource(
        "SubstanceProtein",
        element("sequenceType", "CodeableConcept"),
        element("numberOfSubunits", "integer"),
        element("disulfideLinkage", "string", "0..*"),
        backbone(
            "subunit", "0..*",
            element("subunit", "integer"),
            element("sequence", "string"),
            element("length", "integer"),
            element("sequenceAttachment", "Attachment"),
            element("nTerminalModificationId", "Identifier"),
            element("nTerminalModification", "string"),
            element("cTerminalModificationId", "Identifier"),
            element("cTerminalModification", "string"),
        ),
    ),
    resource(
        "SubstanceReferenceInformation",
        element("comment", "string"),
        backbone(
            "gene", "0..*",
            element("geneSequenceOrigin", "CodeableConcept"),
            element("gene", "CodeableConcept"),
            _sources(),
        ),
        backbone(
            "geneElement", "0..*",
            element("type", "CodeableConcept"),
            element("element", "Identifier"),
            _sources(),
        ),
        backbone(
            "classification", "0..*",
            element("domain", "CodeableConcept"),
            element("classification", "CodeableConcept"),
            element("subtype", "CodeableConcept", "0..*"),
            _sources(),
        ),
        backbone(
            "target", "0..*",
            element("target", "Identifier"),
            element("type", "CodeableConcept"),
            element("interaction", "CodeableConcept"),
            element("organism", "CodeableConcept"),
            element("organismType", "CodeableConcept"),
            choice("amount", ["Quantity", "Range", "string"]),
            element("amountType", "CodeableConcept"),
            _sources(),
        ),
    ),
    resource(
        "SubstanceSourceMaterial",
        element("sourceMaterialClass", "CodeableConcept"),
        element("sourceMaterialType", "CodeableConcept"),
        element("sourceMaterialState", "CodeableConcept"),
        element("organismId", "Identifier"),
        element("organismName", "string"),
        element("parentSubstanceId", "Identifier", "0..*"),
        element("parentSubstanceName", "string", "0..*"),
        element("countryOfOrigin", "CodeableConcept", "0..*"),
        element("geographicalLocation", "string", "0..*"),
        element("developmentStage", "CodeableConcept"),
        backbone(
            "fractionDescription", "0..*",
            element("fraction", "string"),
            element("materialType", "CodeableConcept"),
        ),
        backbone(
            "organism", "0..1",
            element("family", "CodeableConcept"),
            element("genus", "CodeableConcept"),
            element("species", "CodeableConcept"),
            element("intraspecificType", "CodeableConcept"),
            element("intraspecificDescription", "string"),
            backbone(
                "author", "0..*",
                element("authorType", "CodeableConcept"),
                element("authorDescription", "string"),
            ),
            backbone(
                "hybrid", "0..1",
                element("maternalOrganismId", "string"),
                element("maternalOrganismName", "string"),
                element("paternalOrganismId", "string"),
                element("paternalOrganismName", "string"),
                element("hybridType", "CodeableConcept"),
            ),
            backbone(
                "organismGeneral", "0..1",
                element("kingdom", "CodeableConcept"),
                element("phylum", "CodeableConcept"),
                element("class", "CodeableConcept"),
                element("order", "CodeableConcept"),
            ),
        ),
        backbone(
            "partDescription", "0..*",
            element("part", "CodeableConcept"),
            element("partLocation", "CodeableConcept"),
        ),
    ),
    resource(
        "SubstanceSpecification",
        element("identifier", "Identifier"),
        element("type", "CodeableConcept"),
        element("status", "CodeableConcept"),
        element("domain", "CodeableConcept"),
        element("description", "string"),
        _sources(),
        element("comment", "string"),
        backbone(
            "moiety", "0..*",
            element("role", "CodeableConcept"),
            element("identifier", "Identifier"),
            element("name", "string"),
            element("stereochemistry", "CodeableConcept"),
            element("opticalActivity", "CodeableConcept"),
            element("molecularFormula", "string"),
            choice("amount", _AMOUNT),
        ),
        backbone(
            "property", "0..*",
            element("category", "CodeableConcept"),
            element("code", "CodeableConcept"),
            element("parameters", "string"),
            choice("definingSubstance", ["Reference", "CodeableConcept"]),
            choice("amount", _AMOUNT),
        ),
        element("referenceInformation", "Reference"),
        backbone(
            "structure", "0..1",
            element("stereochemistry", "CodeableConcept"),
            element("opticalActivity", "CodeableConcept"),
            element("molecularFormula", "string"),
            element("molecularFormulaByMoiety", "string"),
            backbone(
                "isotope", "0..*",
                element("identifier", "Identifier"),
                element("name", "CodeableConcept"),
                element("substitution", "CodeableConcept"),
                element("halfLife", "Quantity"),
                backbone(
                    "molecularWeight", "0..1",
                    element("method", "CodeableConcept"),
                    element("type", "CodeableConcept"),
                    element("amount", "Quantity"),
                ),
            ),
            element(
                "molecularWeight",
                "#SubstanceSpecification.structure.isotope.molecularWeight",
            ),
            _sources(),
            backbone(
                "representation", "0..*",
                element("type", "CodeableConcept"),
                element("representation", "string"),
                element("attachment", "Attachment"),
            ),
        ),
        backbone(
            "code", "0..*",
            element("code", "CodeableConcept"),
            element("status", "CodeableConcept"),
            element("statusDate", "dateTime"),
            element("comment", "string"),
            _sources(),
        ),
        backbone(
            "name", "0..*",
            element("name", "string", "1..1"),
            element("type", "CodeableConcept"),
            element("status", "CodeableConcept"),
            element("preferred", "boolean"),
            element("language", "CodeableConcept", "0..*"),
            element("domain", "CodeableConcept", "0..*"),
            element("jurisdiction", "CodeableConcept", "0..*"),
            element("synonym", "#SubstanceSpecification.name", "0..*"),
            element("translation", "#SubstanceSpecification.name", "0..*"),
            backbone(
                "official", "0..*",
                element("authority", "CodeableConcept"),
                element("status", "CodeableConcept"),
                element("date", "dateTime"),
            ),
            _sources(),
        ),
        element(
            "molecularWeight",
            "#SubstanceSpecification.structure.isotope.molecularWeight",
            "0..*",
        ),
        backbone(
            "relationship", "0..*",
            choice("substance", ["Reference", "CodeableConcept"]),
            element("relationship", "CodeableConcept"),
            element("isDefining", "boolean"),
            choice("amount", ["Quantity", "Range", "Ratio", "string"]),
            element("amountRatioLowLimit", "Ratio"),
            element("amountType", "CodeableConcept"),
            _sources(),
        ),
        element("nucleicAcid", "Reference"),
        element("polymer", "Reference"),
        element("protein", "Reference"),
        element("sourceMaterial", "Reference"),
    ),
]
