from __future__ import annotations

from typing import Dict, Optional

# Attributs de DN exigés d'un signataire
OID_COMMON_NAME = "2.5.4.3"
OID_COUNTRY_NAME = "2.5.4.6"
OID_LOCALITY_NAME = "2.5.4.7"
OID_ORGANIZATION_NAME = "2.5.4.10"
OID_EMAIL_ADDRESS = "1.2.840.113549.1.9.1"

# Table OID -> nom lisible (affichage uniquement)
OID_NAMES: Dict[str, str] = {
    # {itu-t(0) data(9) pss(2342) ucl(19200300) pilot(100) pilotAttributeType(1)}
    "0.9.2342.19200300.100.1.1": "userId",
    "0.9.2342.19200300.100.1.25": "domainComponent",
    # {iso(1) member-body(2) us(840) x9-57(10040) x9algorithm(4)}
    "1.2.840.10040.4.1": "dsa",
    "1.2.840.10040.4.3": "dsa-with-sha1",
    # {iso(1) member-body(2) us(840) ansi-x962(10045)}
    "1.2.840.10045.2.1": "ecPublicKey",
    "1.2.840.10045.3.1.7": "prime256v1",
    "1.2.840.10045.4.1": "ecdsa-with-SHA1",
    "1.2.840.10045.4.3.1": "ecdsa-with-SHA224",
    "1.2.840.10045.4.3.2": "ecdsa-with-SHA256",
    "1.2.840.10045.4.3.3": "ecdsa-with-SHA384",
    "1.2.840.10045.4.3.4": "ecdsa-with-SHA512",
    # {iso(1) member-body(2) us(840) rsadsi(113549) pkcs(1) pkcs-1(1)}
    "1.2.840.113549.1.1.1": "rsaEncryption",
    "1.2.840.113549.1.1.2": "md2WithRSAEncryption",
    "1.2.840.113549.1.1.4": "md5WithRSAEncryption",
    "1.2.840.113549.1.1.5": "sha1WithRSAEncryption",
    "1.2.840.113549.1.1.7": "rsaesOaep",
    "1.2.840.113549.1.1.8": "mgf1",
    "1.2.840.113549.1.1.10": "rsassaPss",
    "1.2.840.113549.1.1.11": "sha256WithRSAEncryption",
    "1.2.840.113549.1.1.12": "sha384WithRSAEncryption",
    "1.2.840.113549.1.1.13": "sha512WithRSAEncryption",
    "1.2.840.113549.1.1.14": "sha224WithRSAEncryption",
    # {iso(1) member-body(2) us(840) rsadsi(113549) pkcs(1) pkcs-5(5)}
    "1.2.840.113549.1.5.12": "pbkdf2",
    "1.2.840.113549.1.5.13": "pbes2",
    # {iso(1) member-body(2) us(840) rsadsi(113549) pkcs(1) pkcs-7(7)}
    "1.2.840.113549.1.7.1": "pkcs7-data",
    "1.2.840.113549.1.7.2": "pkcs7-signedData",
    "1.2.840.113549.1.7.3": "pkcs7-envelopedData",
    "1.2.840.113549.1.7.4": "pkcs7-signedAndEnvelopedData",
    "1.2.840.113549.1.7.5": "pkcs7-digestedData",
    "1.2.840.113549.1.7.6": "pkcs7-encryptedData",
    # {iso(1) member-body(2) us(840) rsadsi(113549) pkcs(1) pkcs-9(9)}
    OID_EMAIL_ADDRESS: "emailAddress",
    "1.2.840.113549.1.9.2": "unstructuredName",
    "1.2.840.113549.1.9.3": "contentType",
    "1.2.840.113549.1.9.4": "messageDigest",
    "1.2.840.113549.1.9.5": "signingTime",
    "1.2.840.113549.1.9.6": "countersignature",
    "1.2.840.113549.1.9.7": "challengePassword",
    "1.2.840.113549.1.9.14": "extensionRequest",
    "1.2.840.113549.1.9.15": "smimeCapabilities",
    "1.2.840.113549.1.9.16.1.4": "id-ct-TSTInfo",
    "1.2.840.113549.1.9.16.2.12": "signingCertificate",
    "1.2.840.113549.1.9.16.2.14": "timeStampToken",
    "1.2.840.113549.1.9.16.2.47": "signingCertificateV2",
    "1.2.840.113549.1.9.20": "friendlyName",
    "1.2.840.113549.1.9.21": "localKeyID",
    "1.2.840.113549.1.9.22.1": "x509Certificate",
    "1.2.840.113549.1.9.52": "cmsAlgorithmProtection",
    # {iso(1) member-body(2) us(840) rsadsi(113549) digestAlgorithm(2)}
    "1.2.840.113549.2.2": "md2",
    "1.2.840.113549.2.5": "md5",
    "1.2.840.113549.2.7": "hmacWithSHA1",
    "1.2.840.113549.2.9": "hmacWithSHA256",
    # {iso(1) member-body(2) us(840) rsadsi(113549) encryptionAlgorithm(3)}
    "1.2.840.113549.3.7": "des-ede3-cbc",
    # {iso(1) identified-organization(3) oiw(14) secsig(3) algorithms(2)}
    "1.3.14.3.2.26": "sha1",
    "1.3.14.3.2.29": "sha1WithRSASignature",
    # {iso(1) identified-organization(3) certicom(132) curve(0)}
    "1.3.132.0.34": "secp384r1",
    "1.3.132.0.35": "secp521r1",
    # {iso(1) identified-organization(3) thawte(101)}
    "1.3.101.110": "X25519",
    "1.3.101.112": "Ed25519",
    "1.3.101.113": "Ed448",
    # {iso(1) identified-organization(3) dod(6) internet(1) security(5) mechanisms(5) pkix(7)}
    "1.3.6.1.5.5.7.1.1": "authorityInfoAccess",
    "1.3.6.1.5.5.7.1.11": "subjectInfoAccess",
    "1.3.6.1.5.5.7.2.1": "id-qt-cps",
    "1.3.6.1.5.5.7.2.2": "id-qt-unotice",
    "1.3.6.1.5.5.7.3.1": "serverAuth",
    "1.3.6.1.5.5.7.3.2": "clientAuth",
    "1.3.6.1.5.5.7.3.3": "codeSigning",
    "1.3.6.1.5.5.7.3.4": "emailProtection",
    "1.3.6.1.5.5.7.3.8": "timeStamping",
    "1.3.6.1.5.5.7.3.9": "OCSPSigning",
    "1.3.6.1.5.5.7.48.1": "ocsp",
    "1.3.6.1.5.5.7.48.2": "caIssuers",
    # {iso(1) identified-organization(3) dod(6) internet(1) private(4) enterprise(1) microsoft(311)}
    "1.3.6.1.4.1.311.2.1.4": "SPC_INDIRECT_DATA_OBJID",
    "1.3.6.1.4.1.311.2.1.11": "SPC_STATEMENT_TYPE_OBJID",
    "1.3.6.1.4.1.311.2.1.12": "SPC_SP_OPUS_INFO_OBJID",
    "1.3.6.1.4.1.311.2.1.15": "SPC_PE_IMAGE_DATA_OBJID",
    "1.3.6.1.4.1.311.2.1.21": "SPC_INDIVIDUAL_SP_KEY_PURPOSE_OBJID",
    "1.3.6.1.4.1.311.2.1.22": "SPC_COMMERCIAL_SP_KEY_PURPOSE_OBJID",
    "1.3.6.1.4.1.311.2.4.1": "SPC_NESTED_SIGNATURE_OBJID",
    "1.3.6.1.4.1.311.3.3.1": "SPC_RFC3161_OBJID",
    "1.3.6.1.4.1.311.10.3.6": "szOID_NT5_CRYPTO",
    "1.3.6.1.4.1.311.20.2": "szOID_ENROLL_CERTTYPE_EXTENSION",
    "1.3.6.1.4.1.311.21.1": "szOID_CERTSRV_CA_VERSION",
    # {joint-iso-itu-t(2) ds(5) attributeType(4)}
    "2.5.4.0": "objectClass",
    OID_COMMON_NAME: "commonName",
    "2.5.4.4": "surname",
    "2.5.4.5": "serialNumber",
    OID_COUNTRY_NAME: "countryName",
    OID_LOCALITY_NAME: "localityName",
    "2.5.4.8": "stateOrProvinceName",
    "2.5.4.9": "streetAddress",
    OID_ORGANIZATION_NAME: "organizationName",
    "2.5.4.11": "organizationalUnitName",
    "2.5.4.12": "title",
    "2.5.4.13": "description",
    "2.5.4.17": "postalCode",
    "2.5.4.42": "givenName",
    "2.5.4.43": "initials",
    "2.5.4.46": "dnQualifier",
    "2.5.4.97": "organizationIdentifier",
    # {joint-iso-itu-t(2) ds(5) certificateExtension(29)}
    "2.5.29.14": "subjectKeyIdentifier",
    "2.5.29.15": "keyUsage",
    "2.5.29.17": "subjectAltName",
    "2.5.29.18": "issuerAltName",
    "2.5.29.19": "basicConstraints",
    "2.5.29.20": "cRLNumber",
    "2.5.29.21": "cRLReason",
    "2.5.29.31": "cRLDistributionPoints",
    "2.5.29.32": "certificatePolicies",
    "2.5.29.32.0": "anyPolicy",
    "2.5.29.35": "authorityKeyIdentifier",
    "2.5.29.37": "extKeyUsage",
    # {joint-iso-itu-t(2) country(16) us(840) organization(1) gov(101) csor(3) nistAlgorithm(4)}
    "2.16.840.1.101.3.4.1.2": "aes128-CBC",
    "2.16.840.1.101.3.4.1.22": "aes192-CBC",
    "2.16.840.1.101.3.4.1.42": "aes256-CBC",
    "2.16.840.1.101.3.4.2.1": "sha256",
    "2.16.840.1.101.3.4.2.2": "sha384",
    "2.16.840.1.101.3.4.2.3": "sha512",
    "2.16.840.1.101.3.4.2.4": "sha224",
    "2.16.840.1.101.3.4.2.8": "sha3-256",
    "2.16.840.1.101.3.4.2.9": "sha3-384",
    "2.16.840.1.101.3.4.2.10": "sha3-512",
    "2.16.840.1.101.3.4.3.2": "dsa-with-sha256",
    # {joint-iso-itu-t(2) country(16) us(840) organization(1) netscape(113730)}
    "2.16.840.1.113730.1.1": "netscape-cert-type",
    "2.16.840.1.113730.1.13": "netscape-comment",
    # {joint-iso-itu-t(2) international-organizations(23) ca-browser-forum(140)}
    "2.23.140.1.1": "ev-guidelines",
    "2.23.140.1.2.1": "domain-validated",
    "2.23.140.1.2.2": "organization-validated",
}


def oid_name(oid: str) -> Optional[str]:
    return OID_NAMES.get(oid)
